# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parser behavior settings and a loader for TOML / YAML settings files.

`ParserConfig` controls the policy decisions the parse driver makes where a
strict and a lenient reading of the command line are both reasonable: what to
do with unknown options and leftover positionals, whether `-3.14` is a number
or an option, and how to treat two optional fields that share a first letter.

Example `structargs.toml`:

    [structargs]
    unknown_options = "ignore"
    allow_negative_numbers = false

Example `structargs.yaml`:

    unexpected_positionals: ignore
    short_option_collisions: error
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, ConfigDict

from structargs.logger import logger


class ParserConfig(BaseModel):
    """
    Settings consulted by `build_schema` and `RecordParser`.

    Attributes:
        unknown_options: "error" raises `UnknownOptionError` for an option-like
            token that matches no field; "ignore" skips it.
        unexpected_positionals: "error" raises `UnexpectedPositionalError` for a
            positional token left over after every positional field is bound;
            "ignore" skips it.
        allow_negative_numbers: Treat `-3`, `-3.14`, `-.5` and `-1e5` as values
            rather than options.
        short_option_collisions: "first" binds `-x` to the first declared field
            starting with `x`; "error" rejects such records at schema time.
        add_help: Recognize `--help` / `-h` at the top level.
        add_version: Recognize `--version` / `-v` at the top level.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    unknown_options: Literal["error", "ignore"] = "error"
    unexpected_positionals: Literal["error", "ignore"] = "error"
    allow_negative_numbers: bool = True
    short_option_collisions: Literal["first", "error"] = "first"
    add_help: bool = True
    add_version: bool = True


DEFAULT_CONFIG = ParserConfig()


def _read_raw(path: Path) -> Any:
    if path.suffix == ".toml":
        with path.open("r", encoding="UTF-8") as config_file:
            return toml.load(config_file)
    if path.suffix in (".yaml", ".yml"):
        with path.open("r", encoding="UTF-8") as config_file:
            return yaml.safe_load(config_file)
    raise ValueError(f"Unsupported config format: {path.suffix}")


def load_config(file_path: Path | str) -> ParserConfig:
    """
    Load a `ParserConfig` from a TOML or YAML file.

    Settings may live at the top level of the file or inside a `structargs`
    table / mapping.

    Args:
        file_path (Path | str): Path to a `.toml`, `.yaml` or `.yml` file.

    Returns:
        ParserConfig: The validated settings.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the extension is unsupported or the content is not a mapping.
        pydantic.ValidationError: If a setting has an invalid value.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {path}")

    raw_config = _read_raw(path) or {}
    if not isinstance(raw_config, dict):
        raise ValueError("Configuration file must contain a mapping at the top level.")

    section = raw_config.get("structargs", raw_config)
    if not isinstance(section, dict):
        raise ValueError("The 'structargs' section must be a mapping.")

    config = ParserConfig.model_validate(section)
    logger.debug("Loaded parser config from '%s': %s", path, config)
    return config
