"""
Run with the search pattern after `--` to search for text that looks like an option:

    python examples/grep.py -- -v file.csv
"""
from dataclasses import dataclass
from pathlib import Path

from structargs import App, field


@dataclass(kw_only=True)
class GrepOptions:
    """Print lines that contain a pattern."""

    v: bool | None = field(default=False, help="Select non-matching lines.")
    search: str = field(help="Text to look for.")
    pathspec: Path = field(help="File to search.")


def main() -> None:
    options = App(name="grep", version="0.1.0").run(GrepOptions)
    with options.pathspec.open(encoding="UTF-8") as file:
        for line in file:
            if (options.search in line) != options.v:
                print(line, end="")


if __name__ == "__main__":
    main()
