# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Annotation helpers for declaring record fields whose shape a plain Python type
cannot express.

Contents:
- `Length`: `typing.Annotated` marker fixing the number of elements of a list or
  tuple annotation, turning a variable-length sequence into a fixed-size array.
- `Array`: shorthand subscription, `Array[float, 3]` is
  `Annotated[list[float], Length(3)]`. Arrays nest for multi-dimensional values:
  `Array[Array[float, 3], 4]` is a 4x3 matrix read row-major.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any


@dataclass(frozen=True)
class Length:
    """Fixes the element count of a list or tuple annotation."""

    size: int

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise TypeError(f"Length must be an int, got {type(self.size).__name__}")
        if self.size <= 0:
            raise ValueError(f"Length must be a positive integer, got {self.size}")


class Array:
    """
    Annotation helper for fixed-size arrays.

    Example:
        @dataclass
        class Options:
            origin: Array[float, 3]
            matrix: Array[Array[float, 3], 4]
    """

    def __new__(cls, *args: Any, **kwargs: Any):
        raise TypeError("Array is an annotation helper; use Array[element_type, size]")

    def __class_getitem__(cls, params: Any) -> Any:
        if not isinstance(params, tuple) or len(params) != 2:
            raise TypeError(
                "Array takes an element type and a size, e.g. Array[float, 3]"
            )
        element_type, size = params
        return Annotated[list[element_type], Length(size)]
