"""Go source scanning through the Go toolchain's own parser."""
