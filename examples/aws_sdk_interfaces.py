from __future__ import annotations

import os
from pathlib import Path

from ifacegen import InterfaceOptions, generate_interface


def main() -> None:
    # Generate mockable interfaces for a few aws-sdk-go service clients.
    #
    # Requirements:
    # - Go toolchain installed (the declaration scanner runs through `go run`)
    # - The SDK sources checked out under $GOPATH/src (or ~/go/src)
    gopath = Path(os.environ.get("GOPATH") or Path.home() / "go")
    out_pkg = "sample"

    services = [
        # struct, rewrite, go src path
        ("Lambda", "lambda", "github.com/aws/aws-sdk-go/service/lambda"),
        ("Route53", "route53", "github.com/aws/aws-sdk-go/service/route53"),
        ("EC2", "ec2", "github.com/aws/aws-sdk-go/service/ec2"),
        ("S3", "s3", "github.com/aws/aws-sdk-go/service/s3"),
    ]
    for struct, service, package in services:
        generate_interface(
            InterfaceOptions(
                struct_name=struct,
                iface_name=f"{struct}Interface",
                package=out_pkg,
                paths=[str(gopath / "src" / package)],
                add_imports=[package],
                qualifier=service,
                output=f"{out_pkg}/{service}.go",
            )
        )
        print(f"wrote {out_pkg}/{service}.go")


if __name__ == "__main__":
    main()
