import io
from pathlib import Path

import pytest

from minish import Shell


@pytest.fixture
def make_executable():
    def factory(directory: Path, name: str, body: str, *, mode: int = 0o755) -> Path:
        path = directory / name
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(mode)
        return path

    return factory


@pytest.fixture
def shell() -> Shell:
    return Shell(
        env={"HOME": "/nonexistent-home", "PATH": "/usr/bin:/bin"},
        stdout=io.StringIO(),
        stderr=io.StringIO(),
    )
