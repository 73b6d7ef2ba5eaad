# folio/themes.py
from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .model import StyleAttributeSet as S
from .model import Theme


def _theme(
    name: str,
    *,
    page: str,
    title: Tuple[str, str],
    date: Tuple[str, str],
    heading: Tuple[str, str, str],
    section: Tuple[str, str, str, str],
    align: Optional[str] = None,
) -> Theme:
    """Compact constructor.

    title/date:  (font, color)
    heading:     (text color, background, font)
    section:     (text color, font, background, border)
    """
    return Theme(
        name=name,
        page=S(background_color=page),
        title=S(font_family=title[0], color=title[1], align=align),
        date=S(font_family=date[0], color=date[1], align=align),
        heading=S(color=heading[0], background_color=heading[1], font_family=heading[2]),
        section=S(color=section[0], font_family=section[1], background_color=section[2], border_color=section[3]),
    )


# Gradient/effect titles carry color "transparent": not analyzable on purpose.
THEMES: Tuple[Theme, ...] = (
    _theme("Default", page="#FEF7E6", title=("Fredoka", "transparent"), date=("Comic Neue", "#F59E0B"),
           heading=("#FFFFFF", "#10B981", "Fredoka"),
           section=("#1F2937", "Comic Neue", "#FFFFFF", "#A7F3D0"), align="center"),
    _theme("Ocean Blue", page="#F0F9FF", title=("Raleway", "#075985"), date=("Lato", "#0EA5E9"),
           heading=("#FFFFFF", "#0EA5E9", "Raleway"),
           section=("#082F49", "Lato", "#FFFFFF", "#BAE6FD")),
    _theme("Forest Green", page="#F0FDF4", title=("Merriweather", "#14532D"), date=("Nunito", "#15803D"),
           heading=("#FFFFFF", "#15803D", "Merriweather"),
           section=("#14532D", "Nunito", "#FFFFFF", "#BBF7D0")),
    _theme("Tropical Paradise", page="#FFF8DC", title=("Righteous", "transparent"), date=("Comfortaa", "#FF6347"),
           heading=("#FFFFFF", "#FF6347", "Righteous"),
           section=("#8B4513", "Comfortaa", "#FFFFFF", "#FFD700"), align="center"),
    _theme("Beach Day", page="#F0F8FF", title=("Kalam", "transparent"), date=("Comfortaa", "#FF8C00"),
           heading=("#FFFFFF", "#00BFFF", "Kalam"),
           section=("#2F4F4F", "Comfortaa", "#FFFFFF", "#87CEEB"), align="center"),
    _theme("Summer", page="#FFFACD", title=("Righteous", "transparent"), date=("Kalam", "#FF8C00"),
           heading=("#FFFFFF", "#FF8C00", "Righteous"),
           section=("#8B4513", "Kalam", "#FFFFFF", "#FFD700"), align="center"),
    _theme("Sunset", page="#FFF7ED", title=("Playfair Display", "#9A3412"), date=("Lato", "#EA580C"),
           heading=("#FFFFFF", "#F97316", "Playfair Display"),
           section=("#451A03", "Lato", "#FFEDD5", "#FED7AA")),
    _theme("Halloween", page="#1a1a1a", title=("Creepster", "#FF7518"), date=("Merriweather", "#A0A0A0"),
           heading=("#FFFFFF", "#000000", "Creepster"),
           section=("#EAEAEA", "Merriweather", "#2a2a2a", "#FF7518")),
    _theme("Winter Holiday", page="#D6E7F2", title=("Mountains of Christmas", "#0047AB"),
           date=("Playfair Display", "#B22222"),
           heading=("#FFFFFF", "#0047AB", "Mountains of Christmas"),
           section=("#1C3F6E", "Playfair Display", "#FFFFFF", "#B22222")),
    _theme("Valentine's Day", page="#FFF0F5", title=("Pacifico", "#D90166"), date=("Raleway", "#FF69B4"),
           heading=("#FFFFFF", "#FF69B4", "Pacifico"),
           section=("#8B0000", "Raleway", "#FFFFFF", "#FFC0CB")),
    _theme("Patriotic", page="#F0F4F8", title=("Ultra", "#0D2244"), date=("Roboto Condensed", "#B22234"),
           heading=("#FFFFFF", "#0D2244", "Ultra"),
           section=("#212121", "Roboto Condensed", "#FFFFFF", "#B22234")),
    _theme("Storybook", page="#FFFDF8", title=("Fredoka", "#5A3E85"), date=("Comic Neue", "#8B6BB5"),
           heading=("#FFFFFF", "#5A3E85", "Fredoka"),
           section=("#3A2A55", "Comic Neue", "#FFFFFF", "#E4D9F7")),
    _theme("Arcade", page="#0D0F17", title=("Share Tech Mono", "#FF00FF"), date=("Orbitron", "#08F7FE"),
           heading=("#0D0F17", "#08F7FE", "Share Tech Mono"),
           section=("#E6E6E6", "Orbitron", "#1A1F2B", "#39FF14")),
    _theme("Comic Boom", page="#FFF8E1", title=("Bangers", "#FF1744"), date=("Comic Neue", "#3949AB"),
           heading=("#FFFFFF", "#D81B60", "Bangers"),
           section=("#212121", "Comic Neue", "#FFFFFF", "#FFCDD2")),
    _theme("Galaxy Mission", page="#05060A", title=("Orbitron", "#ffffff"), date=("Share Tech Mono", "#2CB67D"),
           heading=("#FFFFFF", "#7F5AF0", "Orbitron"),
           section=("#D9D9E3", "Share Tech Mono", "#161B22", "#2CB67D")),
    _theme("Western", page="#FCF7EE", title=("Rye", "#5C3B18"), date=("Special Elite", "#A36833"),
           heading=("#FFFFFF", "#8B5A2B", "Rye"),
           section=("#4A3624", "Special Elite", "#FFFDF9", "#D9BA94")),
    _theme("Hollywood", page="#0B0B0D", title=("Cinzel Decorative", "#ffffff"), date=("Cinzel", "#C0C0C0"),
           heading=("#0B0B0D", "#FFD700", "Cinzel Decorative"),
           section=("#E4E4E4", "Cinzel", "#141417", "#FFD700")),
    _theme("Magazine", page="#F5F6F8", title=("Oswald", "#111827"), date=("Source Sans 3", "#6B7280"),
           heading=("#111827", "#E5E7EB", "Oswald"),
           section=("#374151", "Source Sans 3", "#FFFFFF", "#D1D5DB")),
    _theme("Christmas", page="#C8B292", title=("Mountains of Christmas", "#B3001B"),
           date=("Playfair Display", "#0F8A0F"),
           heading=("#FFFFFF", "#B3001B", "Mountains of Christmas"),
           section=("#1F3D1F", "Merriweather", "#FFFFFF", "#0F8A0F")),
    _theme("Thanksgiving", page="#FFF8F0", title=("Alegreya SC", "#8B4513"), date=("Lora", "#D2691E"),
           heading=("#FFFFFF", "#D2691E", "Alegreya SC"),
           section=("#4A3624", "Lora", "#FFFFFF", "#F4C28A")),
    _theme("St. Patrick's Day", page="#F0FFF4", title=("Irish Grover", "#065F46"), date=("Nunito", "#059669"),
           heading=("#FFFFFF", "#059669", "Irish Grover"),
           section=("#064E3B", "Nunito", "#FFFFFF", "#34D399")),
)


def theme_names(catalog: Sequence[Theme] = THEMES) -> list[str]:
    return [t.name for t in catalog]


def find_theme(name: Optional[str], catalog: Sequence[Theme] = THEMES) -> Theme:
    """Look up a theme by name; unknown names fall back to the first entry."""
    for t in catalog:
        if t.name == name:
            return t
    if catalog:
        return catalog[0]
    return THEMES[0]


__all__ = [
    "THEMES",
    "find_theme",
    "theme_names",
]
