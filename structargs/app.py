# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `App`, the host around the parse driver.

`App` owns everything the parse engine leaves to its caller: the program name
and version, Rich-rendered help and version output, and the policy that maps a
parse outcome to a process exit status.

Public Interface:
- `App.parse(record_type, arguments)`: Parse a vector into a record; raises on
  errors and help / version requests.
- `App.parse_argv(record_type, argc, argv)`: C-style convenience over `parse`.
- `App.run(record_type, arguments=None)`: Parse `sys.argv` (or `arguments`) and
  exit on help, version or error.
- `App.render_help(record_type)` / `App.render_version()` / `App.get_usage(...)`.
- `parse(record_type, arguments=None, config=None)`: Module-level shortcut.

Exit codes used by `run`:
    0  help or version printed
    1  the command line could not be parsed
"""
from __future__ import annotations

import os
import sys
from typing import Sequence, TypeVar

from rich.console import Console
from rich.markup import escape

from structargs.config import DEFAULT_CONFIG, ParserConfig
from structargs.console import console as default_console
from structargs.console import error_console as default_error_console
from structargs.exceptions import ArgumentError
from structargs.logger import logger
from structargs.parser.record_parser import RecordParser
from structargs.parser.schema import Schema, build_schema
from structargs.signals import HelpSignal, VersionSignal
from structargs.utils import get_program_invocation

T = TypeVar("T")


class App:
    """
    Host for parsing command lines into dataclass records.

    Args:
        name (str): Program name for usage and version output. When empty, the
            basename of the parsed vector's element 0 is used.
        version (str): Version string printed for `--version`.
        description (str): Text shown under the usage line in help output.
        epilog (str): Text shown at the end of help output.
        config (ParserConfig | None): Parser settings.
        console (Console | None): Rich console used for help and version output.
        error_console (Console | None): Rich console used for parse errors;
            writes to stderr by default.
    """

    def __init__(
        self,
        name: str = "",
        version: str = "",
        description: str = "",
        epilog: str = "",
        config: ParserConfig | None = None,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.name: str = name
        self.version: str = version
        self.description: str = description
        self.epilog: str = epilog
        self.config: ParserConfig = config or DEFAULT_CONFIG
        self.console: Console = console or default_console
        self.error_console: Console = error_console or default_error_console
        self._program: str = name

    @property
    def program(self) -> str:
        return self._program or get_program_invocation() or "prog"

    def schema(self, record_type: type) -> Schema:
        return build_schema(record_type, top_level=True, config=self.config)

    def parse(self, record_type: type[T], arguments: Sequence[str] | None = None) -> T:
        """
        Parse an argument vector into an instance of `record_type`.

        Args:
            record_type (type): A dataclass describing the program's arguments.
            arguments (Sequence[str] | None): The argument vector, program name
                first. Defaults to `sys.argv`.

        Returns:
            The populated record.

        Raises:
            SchemaError: If the record type cannot be described.
            ArgumentError: If the vector cannot be parsed.
            HelpSignal / VersionSignal: If help or the version was requested.
        """
        if arguments is None:
            arguments = sys.argv
        arguments = list(arguments)
        if arguments and not self.name:
            self._program = os.path.basename(arguments[0])

        schema = self.schema(record_type)
        logger.debug("[%s] Parsing %r", self.program, arguments[1:])
        return RecordParser(schema, arguments, self.config).parse()

    def parse_argv(self, record_type: type[T], argc: int, argv: Sequence[str]) -> T:
        """Parse the first `argc` entries of `argv`."""
        if argc < 0 or argc > len(argv):
            raise ValueError(f"argc={argc} is out of range for {len(argv)} arguments")
        return self.parse(record_type, list(argv[:argc]))

    def run(self, record_type: type[T], arguments: Sequence[str] | None = None) -> T:
        """
        Parse the command line, exiting the process on help, version or error.

        Returns:
            The populated record when parsing succeeds.
        """
        try:
            return self.parse(record_type, arguments)
        except HelpSignal:
            self.render_help(record_type)
            sys.exit(0)
        except VersionSignal:
            self.render_version()
            sys.exit(0)
        except ArgumentError as error:
            logger.debug("[%s] %r", self.program, error)
            self.error_console.print(f"[error]error:[/] {escape(str(error))}")
            self.error_console.print(
                f"[usage]usage:[/] {escape(self.get_usage(record_type, plain_text=True))}"
            )
            sys.exit(1)

    def get_options_text(self, record_type: type) -> str:
        """Render all arguments of the record as a usage-style string."""
        return _options_text(self.schema(record_type))

    def get_usage(self, record_type: type, plain_text: bool = False) -> str:
        """
        Render the usage string for a record type.

        Returns:
            str: A usage line showing the program name and argument structure.
        """
        options_text = self.get_options_text(record_type)
        program = self.program if plain_text else f"[usage]{escape(self.program)}[/usage]"
        if not plain_text:
            options_text = escape(options_text)
        if options_text:
            return f"{program} {options_text}"
        return program

    def _print_row(self, label: str, help_text: str) -> None:
        arg_line = f"  {label:<30} "
        if help_text and len(label) > 30:
            help_text = f"\n{'':<33}{help_text}"
        self.console.print(f"{escape(arg_line)}{escape(help_text)}")

    def render_help(self, record_type: type) -> None:
        """
        Print formatted help text for a record type using Rich output.

        Includes usage, description, positional arguments, options, subcommands
        and the epilog.
        """
        schema = self.schema(record_type)
        self.console.print(f"[heading]usage:[/heading] {self.get_usage(record_type)}\n")

        if self.description:
            self.console.print(escape(self.description) + "\n")

        if schema.positional_fields:
            self.console.print("[heading]positional:[/heading]")
            for descriptor in schema.positional_fields:
                self._print_row(descriptor.get_choice_text(), descriptor.help)

        if schema.optional_fields:
            self.console.print("[heading]options:[/heading]")
            for descriptor in schema.optional_fields:
                flags = ", ".join(descriptor.get_flags())
                choice_text = descriptor.get_choice_text()
                label = f"{flags} {choice_text}" if choice_text else flags
                help_text = descriptor.help
                if descriptor.has_default and not descriptor.is_bool_flag():
                    default = descriptor.get_default()
                    if default is not None:
                        help_text = f"{help_text} (default: {default})".strip()
                self._print_row(label, help_text)

        if schema.nested_fields:
            self.console.print("[heading]subcommands:[/heading]")
            for descriptor in schema.nested_fields:
                sub_schema = build_schema(
                    descriptor.type, top_level=False, config=self.config
                )
                label = f"{descriptor.name} {_options_text(sub_schema)}".strip()
                self._print_row(label, descriptor.help or _summary(descriptor.type))

        if self.epilog:
            self.console.print("\n" + escape(self.epilog), style="epilog")

    def render_version(self) -> None:
        """Print the program name and version."""
        text = f"{self.program} {self.version}".strip()
        self.console.print(f"[version]{escape(text)}[/version]")

    def __str__(self) -> str:
        return f"App(name={self.name!r}, version={self.version!r})"

    def __repr__(self) -> str:
        return str(self)


def _summary(record_type: type) -> str:
    """First docstring line of a record, ignoring the dataclass-generated signature."""
    doc = (record_type.__doc__ or "").strip()
    if doc.startswith(f"{record_type.__name__}("):
        return ""
    return doc.splitlines()[0] if doc else ""


def _options_text(schema: Schema) -> str:
    options_list = []
    for descriptor in schema.optional_fields:
        choice_text = descriptor.get_choice_text()
        flag = descriptor.get_flags()[-1]
        if choice_text:
            options_list.append(f"[{flag} {choice_text}]")
        else:
            options_list.append(f"[{flag}]")

    for descriptor in schema.positional_fields:
        options_list.append(descriptor.get_choice_text())

    if schema.nested_fields:
        names = ",".join(schema.nested_field_names)
        options_list.append(f"{{{names}}} ...")
    return " ".join(options_list)


def parse(
    record_type: type[T],
    arguments: Sequence[str] | None = None,
    config: ParserConfig | None = None,
) -> T:
    """
    Parse an argument vector into an instance of `record_type`.

    Shortcut for `App(config=config).parse(record_type, arguments)`.
    """
    return App(config=config).parse(record_type, arguments)
