from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, Optional

from .config import CanvasGeometry, load_geometry, min_contrast_from_env
from .document import (
    Document,
    apply_layout,
    apply_theme,
    document_from_dict,
    document_to_dict,
    effective_calendar_style,
    new_document,
)
from .layouts import TEMPLATES
from .themes import theme_names
from .util.console import eprint


def _die(msg: str, rc: int = 2) -> int:
    eprint(f"[folio] ERROR: {msg}")
    return rc


def _read_doc(p: Path) -> Document:
    obj = json.loads(p.read_text(encoding="utf-8"))
    return document_from_dict(obj)


def _write_json(obj: Dict[str, Any], out: Optional[str]) -> None:
    txt = json.dumps(obj, ensure_ascii=False, indent=2) + "\n"
    if not out:
        print(txt, end="")
        return
    out_path = Path(out)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(txt, encoding="utf-8", newline="\n")
    print(str(out_path))


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="folio",
        description="Apply layout templates and themes to newsletter/calendar document snapshots.",
    )
    ap.add_argument("--geometry", default=None, help="JSON file of canvas geometry overrides")
    ap.add_argument(
        "--min-contrast",
        type=float,
        default=None,
        help="Minimum text/background contrast (default: env FOLIO_MIN_CONTRAST or 4.5)",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_new = sub.add_parser("new", help="Write a fresh document snapshot")
    p_new.add_argument("--title", default="Class Newsletter")
    p_new.add_argument("--date", default="")
    p_new.add_argument("--template", default=None, help="Template id (default: first catalog entry)")
    p_new.add_argument("--variant", default=None)
    p_new.add_argument("--theme", default=None)
    p_new.add_argument("--out", default=None, help="Output JSON path (default: stdout)")

    p_layout = sub.add_parser("layout", help="Apply a template/variant to a snapshot")
    p_layout.add_argument("--in", dest="in_json", required=True)
    p_layout.add_argument("--template", required=True)
    p_layout.add_argument("--variant", default=None)
    p_layout.add_argument("--out", default=None)

    p_theme = sub.add_parser("theme", help="Apply a theme to a snapshot")
    p_theme.add_argument("--in", dest="in_json", required=True)
    p_theme.add_argument("--theme", required=True)
    p_theme.add_argument("--out", default=None)

    p_cal = sub.add_parser("calendar-style", help="Print the effective calendar style of a snapshot")
    p_cal.add_argument("--in", dest="in_json", required=True)

    sub.add_parser("list", help="List template ids and theme names")
    return ap


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)

    geometry: Optional[CanvasGeometry] = None
    if ns.geometry:
        try:
            geometry = load_geometry(Path(ns.geometry))
        except (OSError, TypeError, ValueError) as e:
            return _die(f"Failed to load geometry: {e}")

    try:
        min_contrast = ns.min_contrast if ns.min_contrast is not None else min_contrast_from_env()
    except ValueError as e:
        return _die(str(e))

    if ns.cmd == "list":
        for t in TEMPLATES:
            print(f"template\t{t.id}\t{t.slots}\t" + ",".join(v.name for v in t.variants))
        for name in theme_names():
            print(f"theme\t{name}")
        return 0

    if ns.cmd == "new":
        doc = new_document(
            ns.title,
            ns.date,
            template_id=ns.template,
            variant_name=ns.variant,
            theme_name=ns.theme,
            geometry=geometry,
        )
        _write_json(document_to_dict(doc), ns.out)
        return 0

    p = Path(ns.in_json)
    if not p.exists():
        return _die(f"Missing JSON file: {p}")
    try:
        doc = _read_doc(p)
    except (OSError, ValueError) as e:
        return _die(f"Failed to load snapshot: {p} ({e})")

    if ns.cmd == "layout":
        if ns.template not in {t.id for t in TEMPLATES} | {t.legacy_name for t in TEMPLATES if t.legacy_name}:
            eprint(f"[folio] WARN: unknown template {ns.template!r}; using {TEMPLATES[0].id}")
        _write_json(document_to_dict(apply_layout(doc, ns.template, ns.variant, geometry=geometry)), ns.out)
        return 0

    if ns.cmd == "theme":
        if ns.theme not in theme_names():
            eprint(f"[folio] WARN: unknown theme {ns.theme!r}; using {theme_names()[0]}")
        res = apply_theme(doc, ns.theme, geometry=geometry, min_contrast=min_contrast)
        for name in res.cleared:
            eprint(f"[folio] cleared theme-linked override: {name}")
        _write_json(document_to_dict(res.document), ns.out)
        return 0

    if ns.cmd == "calendar-style":
        style = effective_calendar_style(doc, min_contrast=min_contrast)
        _write_json(style.as_dict(), None)
        return 0

    return _die(f"unknown command: {ns.cmd}")


if __name__ == "__main__":
    raise SystemExit(main())
