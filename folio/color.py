# folio/color.py
"""Hex color parsing and WCAG-style contrast math.

Only `#rgb` / `#rrggbb` strings are analyzable. Everything else (named colors,
`transparent`, gradients, 8-digit hex) is treated as "not analyzable": the
helpers below return a documented fallback instead of raising.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

Rgb = Tuple[int, int, int]

_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}){1,2}$")

BLACK = "#000000"
WHITE = "#ffffff"

# Mix ratio and step budget used when nudging a color toward black/white.
CONTRAST_STEP = 0.2
CONTRAST_MAX_STEPS = 12


def is_hex_color(value: object) -> bool:
    return isinstance(value, str) and bool(_HEX_RE.match(value.strip()))


def parse_hex(value: object) -> Optional[Rgb]:
    """Parse `#rgb` or `#rrggbb` into an (r, g, b) triple; None if not analyzable."""
    if not is_hex_color(value):
        return None
    digits = str(value).strip()[1:]
    if len(digits) == 3:
        digits = "".join(c + c for c in digits)
    n = int(digits, 16)
    return (n >> 16) & 255, (n >> 8) & 255, n & 255


def to_hex(rgb: Rgb) -> str:
    r, g, b = (max(0, min(255, int(c))) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def normalize_hex(value: object, default: Optional[str] = None) -> Optional[str]:
    """Return the canonical lowercase 6-digit form, or `default` when unparseable."""
    rgb = parse_hex(value)
    if rgb is None:
        return default
    return to_hex(rgb)


def _linear(channel: int) -> float:
    cs = channel / 255.0
    if cs <= 0.03928:
        return cs / 12.92
    return ((cs + 0.055) / 1.055) ** 2.4


def relative_luminance(value: object) -> float:
    """Relative luminance in [0, 1]. Unparseable input counts as black (0.0)."""
    rgb = parse_hex(value)
    if rgb is None:
        return 0.0
    r, g, b = (_linear(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(a: object, b: object) -> float:
    la = relative_luminance(a)
    lb = relative_luminance(b)
    light = max(la, lb)
    dark = min(la, lb)
    return (light + 0.05) / (dark + 0.05)


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def mix(color: str, with_color: str, ratio: float) -> str:
    """Blend `color` toward `with_color` by `ratio` (0 = color, 1 = with_color).

    Returns `color` unchanged when either side is not analyzable.
    """
    a = parse_hex(color)
    b = parse_hex(with_color)
    if a is None or b is None:
        return color
    ratio = max(0.0, min(1.0, float(ratio)))
    r, g, bl = (_round_half_up(x * (1 - ratio) + y * ratio) for x, y in zip(a, b))
    return to_hex((r, g, bl))


def _contrast_extreme(bg: str) -> str:
    # Whichever of black/white stands out more against bg.
    if contrast_ratio(BLACK, bg) >= contrast_ratio(WHITE, bg):
        return BLACK
    return WHITE


def ensure_contrast(color: str, bg: str, target: float = 4.5) -> str:
    """Nudge `color` toward black or white until it reaches `target` against `bg`.

    At most CONTRAST_MAX_STEPS mixes of CONTRAST_STEP each. When the steps run
    out short of `target` the extreme itself is returned if it reaches
    `target`; otherwise the best color seen is returned. Non-analyzable input on
    either side is returned unchanged.
    """
    if not is_hex_color(color) or not is_hex_color(bg):
        return color

    current = normalize_hex(color) or color
    ratio = contrast_ratio(current, bg)
    if ratio >= target:
        return current

    toward = _contrast_extreme(bg)
    best, best_ratio = current, ratio
    for _ in range(CONTRAST_MAX_STEPS):
        current = mix(current, toward, CONTRAST_STEP)
        ratio = contrast_ratio(current, bg)
        if ratio > best_ratio:
            best, best_ratio = current, ratio
        if ratio >= target:
            return current
    if contrast_ratio(toward, bg) >= target:
        return toward
    return best


def with_alpha(color: str, alpha_hex: str) -> Optional[str]:
    """Append a 2-digit alpha to a 3/6-digit color (`#rrggbbaa`); None if unparseable."""
    base = normalize_hex(color)
    if base is None:
        return None
    return base + alpha_hex.lower()


__all__ = [
    "BLACK",
    "CONTRAST_MAX_STEPS",
    "CONTRAST_STEP",
    "WHITE",
    "contrast_ratio",
    "ensure_contrast",
    "is_hex_color",
    "mix",
    "normalize_hex",
    "parse_hex",
    "relative_luminance",
    "to_hex",
    "with_alpha",
]
