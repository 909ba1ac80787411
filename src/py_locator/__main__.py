"""Print the Python environments found on PATH as JSON."""

from __future__ import annotations

import json
from logging import basicConfig

from ._env import OSEnvironment
from ._path import PythonOnPath


def _run() -> None:
    basicConfig()
    result = PythonOnPath(OSEnvironment()).find()
    print(json.dumps(None if result is None else result.to_dict(), indent=2))  # noqa: T201


if __name__ == "__main__":
    _run()
