"""
Subcommands are nested dataclass fields:

    python examples/git.py --verbose add -f a.txt b.txt
    python examples/git.py commit --all "Fix the parser"
"""
from dataclasses import dataclass

from structargs import App, field
from structargs.console import console


@dataclass(kw_only=True)
class Add:
    """Add file contents to the index."""

    files: list[str] = field(help="Files to add.")
    force: bool | None = field(default=False, help="Allow adding ignored files.")


@dataclass(kw_only=True)
class Commit:
    """Record changes to the repository."""

    message: str = field(help="Commit message.")
    all: bool | None = field(default=False, help="Stage all modified files.")


@dataclass(kw_only=True)
class Git:
    verbose: bool | None = field(default=False, help="Be more talkative.")
    add: Add | None = None
    commit: Commit | None = None


def main() -> None:
    options = App(name="git", version="2.0.0").run(Git)
    if options.add:
        console.print(f"adding {options.add.files} (force={options.add.force})")
    elif options.commit:
        console.print(f"committing {options.commit.message!r} (all={options.commit.all})")
    else:
        console.print("nothing to do", style="error")


if __name__ == "__main__":
    main()
