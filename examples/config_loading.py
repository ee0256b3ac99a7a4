"""
Load parser settings from a file next to this script:

    python examples/config_loading.py --tag v1 extra --what
"""
from dataclasses import dataclass
from pathlib import Path

from structargs import App, load_config


@dataclass
class Options:
    tag: str | None = None


def main() -> None:
    config = load_config(Path(__file__).parent / "structargs.yaml")
    options = App(name="lenient", config=config).run(Options)
    print(options)


if __name__ == "__main__":
    main()
