#!/usr/bin/env python3
from __future__ import annotations

import argparse

from folio.validate import validate_catalog
from folio.util.console import eprint


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="folio-validate-catalog",
        description="Check the built-in template, line-style and theme catalogs for consistency.",
    )
    ap.add_argument("--quiet", action="store_true", help="Only print on failure")
    ns = ap.parse_args(argv)

    errs = validate_catalog()
    if errs:
        eprint("[folio-validate-catalog] FAIL")
        for e in errs:
            eprint(f"  - {e}")
        return 3

    if not ns.quiet:
        print("[folio-validate-catalog] OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
