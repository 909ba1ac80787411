from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from shlex import quote
from subprocess import PIPE, Popen  # noqa: S404
from typing import NamedTuple

LOGGER = logging.getLogger(__name__)

_VERSION_SCRIPT = "import sys; print(sys.version)"


class PythonEnv(NamedTuple):
    """A candidate interpreter handed to :meth:`Locator.resolve`."""

    executable: Path
    path: Path | None  # the environment root, if known
    version: str | None


def as_command(executable: Path) -> str:
    """
    Render an executable so that running it never goes through a ``PATH`` lookup.

    :param executable: the executable
    :return: the path as text, with an explicit ``.`` folder when the executable lives in the current directory

    """
    if executable.parent == Path(os.curdir):  # pathlib drops a leading "." folder
        return os.path.join(os.curdir, executable.name)  # noqa: PTH118
    return str(executable)


def get_version(executable: Path) -> str | None:
    """
    Ask an interpreter for its version.

    :param executable: the interpreter to run
    :return: the version number as reported by ``sys.version`` (e.g. ``3.11.2``), ``None`` if it cannot be queried

    """
    cmd = [as_command(executable), "-c", _VERSION_SCRIPT]
    LOGGER.debug("get version via cmd: %s", LogCmd(cmd))
    try:
        process = Popen(
            cmd,  # noqa: S603
            stdin=PIPE,
            stderr=PIPE,
            stdout=PIPE,
            encoding="utf-8",
            errors="replace",
        )
        out, err = process.communicate()
        code = process.returncode
    except OSError as os_error:
        out, err, code = "", os_error.strerror, os_error.errno
    if code != 0:
        err_str = f" err: {err!r}" if err else ""
        LOGGER.info("failed to query version of %s with code %s%s", executable, code, err_str)
        return None
    parts = out.split()
    if not parts:
        LOGGER.info("failed to query version of %s: no output", executable)
        return None
    return parts[0]


def split_paths(value: str) -> list[str]:
    """
    Split a ``PATH`` like value into its entries.

    On Windows entries are separated by ``;`` and may be wrapped in double quotes (to protect a ``;`` within the
    path), elsewhere by ``:``. An empty entry stands for the current directory.

    """
    if sys.platform != "win32":
        return [p or os.curdir for p in value.split(":")]
    entries: list[str] = []
    current: list[str] = []
    in_quote = False
    for char in value:
        if char == '"':
            in_quote = not in_quote
        elif char == ";" and not in_quote:
            entries.append("".join(current))
            current = []
        else:
            current.append(char)
    entries.append("".join(current))
    return [p or os.curdir for p in entries]


class LogCmd:
    def __init__(self, cmd: list[str]) -> None:
        self.cmd = cmd

    def __repr__(self) -> str:
        return " ".join(quote(str(c)) for c in self.cmd)


__all__ = [
    "LogCmd",
    "as_command",
    "PythonEnv",
    "get_version",
    "split_paths",
]
