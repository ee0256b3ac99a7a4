# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the Rich theme used when rendering help, version and
error output.

`OneColors` holds raw hex values usable inline in Rich markup
(e.g. `f"[{OneColors.DARK_RED}]error[/]"`). `get_theme()` maps the semantic
style names the help renderer uses onto those colors.
"""
from rich.theme import Theme


class OneColors:
    """One Dark palette."""

    DARK_RED = "#BE5046"
    DARK_RED_b = "bold #BE5046"
    GREEN = "#98C379"
    GREEN_b = "bold #98C379"
    CYAN = "#56B6C2"
    CYAN_b = "bold #56B6C2"


def get_theme() -> Theme:
    """Return the Rich theme with the semantic styles used by `App`."""
    return Theme(
        {
            "usage": OneColors.CYAN_b,
            "heading": "bold",
            "error": OneColors.DARK_RED_b,
            "version": OneColors.GREEN_b,
            "epilog": "dim",
        }
    )
