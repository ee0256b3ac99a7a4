"""
Read a 4x3 matrix row-major and print it:

    python examples/matrix.py 1 0 0  0 1 0  0 0 1  -2.5 3 0.5
"""
from dataclasses import dataclass

from rich.table import Table

from structargs import App, Array, field
from structargs.console import console


@dataclass(kw_only=True)
class MatrixOptions:
    matrix: Array[Array[float, 3], 4] = field(help="Twelve values, row by row.")
    title: str | None = field(default="matrix", help="Table title.")


def main() -> None:
    options = App(name="matrix").run(MatrixOptions)
    table = Table(title=options.title)
    for column in ("x", "y", "z"):
        table.add_column(column, justify="right")
    for row in options.matrix:
        table.add_row(*(f"{value:g}" for value in row))
    console.print(table)


if __name__ == "__main__":
    main()
