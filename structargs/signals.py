# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by the structargs parse driver.

These signals end a parse without a record and without an error: the user asked
for help or for the version string, and the caller is expected to print it and
exit successfully.

All signals inherit from `FlowSignal`, which is a subclass of `BaseException`
to ensure they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: `--help` / `-h` was given at the top level.
- VersionSignal: `--version` / `-v` was given at the top level.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in structargs.

    These are not errors. They are terminal parse outcomes the host turns into
    output and a zero exit status.
    """


class HelpSignal(FlowSignal):
    """Raised to display help information."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)


class VersionSignal(FlowSignal):
    """Raised to display the program version."""

    def __init__(self, message: str = "Version signal received."):
        super().__init__(message)
