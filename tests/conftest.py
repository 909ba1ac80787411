from __future__ import annotations

import os
import sys
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Callable

import pytest

from py_locator import OSEnvironment
from py_locator._path import bin_name


@pytest.fixture(scope="session")
def _fs_supports_symlink() -> None:
    can = False
    if hasattr(os, "symlink"):  # pragma: no branch
        if sys.platform == "win32":  # pragma: win32 cover
            with NamedTemporaryFile(prefix="TmP") as tmp_file:
                temp_dir = os.path.dirname(tmp_file.name)  # noqa: PTH120
                dest = os.path.join(temp_dir, f"{tmp_file.name}-{'b'}")  # noqa: PTH118
                try:
                    os.symlink(tmp_file.name, dest)
                    can = True  # pragma: no cover
                except (OSError, NotImplementedError):  # pragma: no cover
                    pass  # pragma: no cover
        else:  # pragma: win32 no cover
            can = True
    if not can:  # pragma: no branch
        pytest.skip("No symlink support")  # pragma: no cover


@pytest.fixture()
def home(tmp_path: Path) -> Path:
    result = tmp_path / "home"
    result.mkdir()
    return result


@pytest.fixture()
def make_python(tmp_path: Path) -> Callable[[str], Path]:
    """Create an (empty) python executable within a folder relative to the temporary directory."""

    def _make(folder: str) -> Path:
        target = tmp_path / folder
        target.mkdir(parents=True, exist_ok=True)
        exe = target / bin_name()
        exe.write_text("", encoding="utf-8")
        return exe

    return _make


@pytest.fixture()
def make_env(home: Path) -> Callable[..., OSEnvironment]:
    def _make(*folders: Path | str) -> OSEnvironment:
        return OSEnvironment({"PATH": os.pathsep.join(str(f) for f in folders)}, home=home)

    return _make
