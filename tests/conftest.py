from __future__ import annotations

import io
import shutil
from pathlib import Path

import pytest
from rich.console import Console

from colorscan.console import RichLogger

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class CapturingLogger(RichLogger):
    def __init__(self, verbose: bool = False):
        self.out = io.StringIO()
        self.err = io.StringIO()
        super().__init__(
            console=Console(file=self.out, width=500),
            err_console=Console(file=self.err, width=500),
            verbose=verbose,
        )


@pytest.fixture
def logger():
    return CapturingLogger()


@pytest.fixture
def fixtures_copy(tmp_path):
    target = tmp_path / "fixtures"
    shutil.copytree(FIXTURES_DIR, target)
    return target
