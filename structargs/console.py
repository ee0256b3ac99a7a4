# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for structargs help output and parse errors."""
from rich.console import Console

from structargs.themes import get_theme

console = Console(theme=get_theme())
error_console = Console(stderr=True, theme=get_theme())
