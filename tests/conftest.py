from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient

from blogsite.config import Config
from blogsite.main import create_app

if TYPE_CHECKING:
    from pathlib import Path

POST_FILES = [
    "My_First_Post----Jane_Doe.html",
    "Particle_Physics_Notes----Miles_McGibbon.md",
    "plainfile.md",
]


@pytest.fixture
def blog_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "blogs"
    directory.mkdir()
    for name in POST_FILES:
        (directory / name).write_text(f"<p>{name}</p>", encoding="utf-8")
    return directory


@pytest.fixture
def make_client():
    def _make(**settings) -> TestClient:
        return TestClient(create_app(Config(**settings)))

    return _make


@pytest.fixture
def client(blog_dir: Path, make_client) -> TestClient:
    return make_client(BLOG_DIRECTORY_PATH=str(blog_dir))


@pytest.fixture
def undecodable_dir(tmp_path: Path) -> Path:
    """A directory holding one normal post and one whose name is not valid UTF-8."""
    if not sys.platform.startswith("linux"):
        pytest.skip("needs a filesystem that accepts arbitrary filename bytes")
    directory = tmp_path / "mixed"
    directory.mkdir()
    (directory / "Good----Jane.md").write_text("<p>good</p>", encoding="utf-8")
    with open(os.path.join(os.fsencode(directory), b"Caf\xe9----Bob.md"), "wb") as f:
        f.write(b"<p>cafe</p>")
    return directory
