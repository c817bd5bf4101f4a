from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from .. import toolchain
from ..errors import GoToolchainError
from .units import CompilationUnit, unit_from_json


def scan_sources(sources: list[tuple[str, str]]) -> list[CompilationUnit]:
    """Parse Go sources into declaration lists using `go/parser`.

    `sources` is a list of `(filename, src)` pairs; filename is used for
    position information only. Units come back in input order. A unit that
    fails to parse is returned with `error` set rather than raised here, so
    the caller can report it at the point it would be processed.
    """
    if not sources:
        return []

    payload = json.dumps(
        {"units": [{"filename": name, "src": src} for name, src in sources]}
    ).encode("utf-8")

    with tempfile.TemporaryDirectory(prefix="ifacegen-goscan-") as td:
        scan_dir = Path(td)
        (scan_dir / "go.mod").write_text(
            "\n".join(
                [
                    "module ifacegen.goscan",
                    "",
                    "go 1.18",
                    "",
                ]
            ),
            encoding="utf-8",
        )
        (scan_dir / "main.go").write_text(_scanner_go_source(), encoding="utf-8")

        # The helper module must not join a workspace the user may have active.
        env = dict(os.environ)
        env["GOWORK"] = "off"

        proc = toolchain.run(
            [toolchain.go_binary(), "run", "."],
            input=payload,
            cwd=scan_dir,
            env=env,
        )
        if proc.returncode != 0:
            raise GoToolchainError(f"go scan failed\n{toolchain.decode_output(proc)}")

    stdout = (proc.stdout or b"").decode("utf-8", errors="replace")
    try:
        obj = json.loads(stdout)
    except ValueError as e:
        raise GoToolchainError(f"failed to parse go scan output: {e}\n{stdout}") from e

    raw_units = obj.get("units") if isinstance(obj, dict) else None
    if (
        not isinstance(raw_units, list)
        or len(raw_units) != len(sources)
        or not all(isinstance(u, dict) for u in raw_units)
    ):
        raise GoToolchainError(f"go scan returned an unexpected payload\n{stdout}")
    return [unit_from_json(u) for u in raw_units]


def scan_source(src: str, filename: str) -> CompilationUnit:
    return scan_sources([(filename, src)])[0]


def _scanner_go_source() -> str:
    # Keep this file stdlib-only so `go run` doesn't need network access.
    return r'''
package main

import (
	"bytes"
	"encoding/json"
	"fmt"
	"go/ast"
	"go/parser"
	"go/printer"
	"go/token"
	"os"
	"strconv"
)

type inUnit struct {
	Filename string `json:"filename"`
	Src      string `json:"src"`
}

type inObj struct {
	Units []inUnit `json:"units"`
}

type outField struct {
	Names     []string `json:"names"`
	Type      string   `json:"type"`
	TypeError string   `json:"type_error,omitempty"`
}

type outImport struct {
	Name *string `json:"name"`
	Path string  `json:"path"`
}

type outDecl struct {
	Kind    string      `json:"kind"`
	Name    string      `json:"name,omitempty"`
	Recv    []outField  `json:"recv,omitempty"`
	Params  []outField  `json:"params,omitempty"`
	Results []outField  `json:"results,omitempty"`
	Doc     []string    `json:"doc,omitempty"`
	Specs   []outImport `json:"specs,omitempty"`
}

type outUnit struct {
	Filename string    `json:"filename"`
	Package  string    `json:"package"`
	Error    string    `json:"error,omitempty"`
	Decls    []outDecl `json:"decls"`
}

type outObj struct {
	Units []outUnit `json:"units"`
}

func main() {
	var in inObj
	if err := json.NewDecoder(os.Stdin).Decode(&in); err != nil {
		fmt.Fprintf(os.Stderr, "decode input: %v\n", err)
		os.Exit(2)
	}

	out := outObj{Units: make([]outUnit, 0, len(in.Units))}
	for _, u := range in.Units {
		out.Units = append(out.Units, scanUnit(u))
	}

	enc := json.NewEncoder(os.Stdout)
	enc.SetEscapeHTML(false)
	if err := enc.Encode(out); err != nil {
		fmt.Fprintf(os.Stderr, "encode output: %v\n", err)
		os.Exit(1)
	}
}

func scanUnit(u inUnit) outUnit {
	res := outUnit{Filename: u.Filename, Decls: []outDecl{}}
	fset := token.NewFileSet()
	af, err := parser.ParseFile(fset, u.Filename, u.Src, parser.ParseComments)
	if err != nil {
		res.Error = err.Error()
		return res
	}
	res.Package = af.Name.Name

	for _, d := range af.Decls {
		switch d := d.(type) {
		case *ast.FuncDecl:
			res.Decls = append(res.Decls, funcDecl(fset, d))
		case *ast.GenDecl:
			if d.Tok != token.IMPORT {
				res.Decls = append(res.Decls, outDecl{Kind: "other"})
				continue
			}
			decl := outDecl{Kind: "import", Specs: []outImport{}}
			for _, s := range d.Specs {
				is, ok := s.(*ast.ImportSpec)
				if !ok {
					continue
				}
				path, err := strconv.Unquote(is.Path.Value)
				if err != nil {
					res.Error = fmt.Sprintf("parsing import `%v` failed: %v", is.Path.Value, err)
					res.Decls = []outDecl{}
					return res
				}
				imp := outImport{Path: path}
				if is.Name != nil {
					name := is.Name.Name
					imp.Name = &name
				}
				decl.Specs = append(decl.Specs, imp)
			}
			res.Decls = append(res.Decls, decl)
		default:
			res.Decls = append(res.Decls, outDecl{Kind: "other"})
		}
	}
	return res
}

func funcDecl(fset *token.FileSet, fd *ast.FuncDecl) outDecl {
	d := outDecl{
		Kind:    "func",
		Name:    fd.Name.Name,
		Recv:    fields(fset, fd.Recv),
		Params:  fields(fset, fd.Type.Params),
		Results: fields(fset, fd.Type.Results),
	}
	if fd.Doc != nil {
		for _, c := range fd.Doc.List {
			d.Doc = append(d.Doc, c.Text)
		}
	}
	return d
}

func fields(fset *token.FileSet, fl *ast.FieldList) []outField {
	out := []outField{}
	if fl == nil {
		return out
	}
	for _, f := range fl.List {
		of := outField{Names: []string{}}
		for _, n := range f.Names {
			of.Names = append(of.Names, n.Name)
		}
		var buf bytes.Buffer
		if err := printer.Fprint(&buf, fset, f.Type); err != nil {
			of.TypeError = err.Error()
		} else {
			of.Type = buf.String()
		}
		out = append(out, of)
	}
	return out
}
'''
