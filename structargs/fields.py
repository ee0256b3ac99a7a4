# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Defines `field`, a thin wrapper around `dataclasses.field` that records help text."""
from __future__ import annotations

import dataclasses
from typing import Any


def field(
    help: str | None = None,
    metadata: dict[str, Any] | None = None,
    **kwargs: Any,
) -> Any:
    """
    This is a thin wrapper around `dataclasses.field`.

    Args:
        help (str | None): Help text shown next to the argument in `--help` output.
        metadata (dict | None): Identical to the `metadata` argument of `dataclasses.field`.
        **kwargs: Passed through to `dataclasses.field` (`default`, `default_factory`, ...).

    Returns:
        A `dataclasses.Field` usable in place of a default value.

    Example:
        @dataclass(kw_only=True)
        class Options:
            output: str | None = field(default=None, help="Where to write results.")
            files: list[str] = field(default_factory=list, help="Input files.")
    """
    metadata = dict(metadata or {})
    if help is not None:
        metadata.update(help=help)
    return dataclasses.field(metadata=metadata, **kwargs)
