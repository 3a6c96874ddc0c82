# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color palette and rich theme used across flagpick output.

`OneColors` exposes the One Dark palette as rich style strings. Every base color
also gets a bold variant with a `_b` suffix (e.g. `OneColors.GREEN_b`) generated
by `ColorsMeta`, so markup reads as `f"[{OneColors.GREEN_b}]text[/]"`.
"""
from rich.style import Style
from rich.theme import Theme


class ColorsMeta(type):
    """Adds a bold `<NAME>_b` variant for every upper-case color attribute."""

    def __new__(mcs, name, bases, namespace):
        bold = {
            f"{key}_b": f"bold {value}"
            for key, value in namespace.items()
            if key.isupper() and isinstance(value, str)
        }
        namespace.update(bold)
        return super().__new__(mcs, name, bases, namespace)


class OneColors(metaclass=ColorsMeta):
    BLACK = "#282C34"
    GUTTER_GREY = "#4B5263"
    COMMENT_GREY = "#5C6370"
    WHITE = "#ABB2BF"
    DARK_RED = "#BE5046"
    LIGHT_RED = "#E06C75"
    DARK_YELLOW = "#D19A66"
    LIGHT_YELLOW = "#E5C07B"
    GREEN = "#98C379"
    CYAN = "#56B6C2"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"


def get_one_theme() -> Theme:
    """Rich theme exposing the palette under semantic names."""
    return Theme(
        {
            "flag.selected": Style.parse(OneColors.GREEN_b),
            "flag.cursor": Style(reverse=True),
            "flag.cursor.selected": Style.parse(f"{OneColors.GREEN_b} reverse"),
            "flag.token": Style.parse(OneColors.CYAN),
            "preview.label": Style.parse(OneColors.LIGHT_YELLOW),
        }
    )
