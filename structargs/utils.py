# Structargs CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Host-side helpers: program name detection and logging setup."""
from __future__ import annotations

import logging
import os
import shutil
import sys

import pythonjsonlogger.json
from rich.logging import RichHandler


def get_program_invocation() -> str:
    """Returns the recommended program invocation prefix."""
    script = sys.argv[0] if sys.argv else ""
    program = shutil.which(script) if script else None
    if program:
        return os.path.basename(program)

    executable = sys.executable
    if "python" in executable and script:
        return f"python {script}"
    return script


_CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
_JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_TEXT_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def running_in_container() -> bool:
    """True when PID 1's cgroup names a container runtime."""
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as cgroup:
            content = cgroup.read()
    except OSError:
        return False
    return any(marker in content for marker in _CONTAINER_MARKERS)


def _json_formatter() -> logging.Formatter:
    return pythonjsonlogger.json.JsonFormatter(_JSON_FORMAT)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(_json_formatter())
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(_json_formatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route log records from the parse driver to the console and, optionally, a file.

    The parser never calls this itself; host programs opt in. Existing root
    handlers are replaced.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for one JSON
            object per line. Defaults to `STRUCTARGS_LOG_MODE`, then to "json"
            inside a container and "cli" elsewhere.
        log_filename (str | None): Also append records to this file.
        json_log_to_file (bool): Write the file as JSON instead of plain text.
        file_log_level (int): Threshold for the file handler.
        console_log_level (int): Threshold for the console handler.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    mode = mode or os.getenv("STRUCTARGS_LOG_MODE")
    if not mode:
        mode = "json" if running_in_container() else "cli"
    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)

    logging.getLogger("structargs").debug("Logging initialized in '%s' mode.", mode)
