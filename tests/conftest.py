"""
pytest configuration and fixtures for phototriage tests.
"""

import io
import logging
import os
import sys
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, List

import pytest
from PIL import Image
from rich.console import Console

from phototriage.actions import Action
from phototriage.constants import PROGRAM
from phototriage.reporting import RecordingReporter


@dataclass
class CliResult:
    """Result from running CLI command."""
    exit_code: int
    output: str
    error: str


class ScriptedPrompt:
    """Stands in for the interactive menu by replaying a fixed list of actions."""

    def __init__(self, actions: Iterable[Action]):
        self.actions = list(actions)
        self.calls = 0

    def __call__(self) -> Action:
        if self.calls >= len(self.actions):
            raise AssertionError("Prompt called more often than scripted")
        action = self.actions[self.calls]
        self.calls += 1
        return action


@pytest.fixture(autouse=True)
def shown_images(monkeypatch):
    """Never open a real image viewer; record what would have been shown."""
    shown = []

    def fake_show(self, title=None):
        shown.append(title)

    monkeypatch.setattr(Image.Image, "show", fake_show)
    return shown


@pytest.fixture(autouse=True)
def isolated_logger():
    """Restore the program logger after tests that configure it."""
    logger = logging.getLogger(PROGRAM)
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def temp_dir_root(tmp_path, monkeypatch):
    """Point the system temporary location at a per-test folder."""
    root = tmp_path / "systemp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def scripted_prompt():
    """Build a prompt that answers with the given actions in order."""
    return ScriptedPrompt


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def create_test_files(tmp_path):
    """Helper to create test files with specific properties."""

    def create_files(file_specs: List[dict], folder: str = "source") -> Path:
        """Create test files based on specifications.

        Args:
            file_specs: List of dicts with keys:
                - name: filename
                - content: file content (optional)
                - image: Pillow format name to write a real image (optional)
                - mtime: modification time as datetime (optional)

        Returns:
            Path to directory containing created files
        """
        test_dir = tmp_path / folder
        test_dir.mkdir(exist_ok=True)

        for spec in file_specs:
            file_path = test_dir / spec['name']
            file_path.parent.mkdir(parents=True, exist_ok=True)

            if 'image' in spec:
                Image.new("RGB", (8, 8), (200, 30, 30)).save(file_path, format=spec['image'])
            else:
                content = spec.get('content', b'test file content')
                if isinstance(content, str):
                    file_path.write_text(content)
                else:
                    file_path.write_bytes(content)

            if 'mtime' in spec:
                mtime = spec['mtime'].timestamp()
                os.utime(file_path, (mtime, mtime))

        return test_dir

    return create_files


@pytest.fixture
def photo_folder(create_test_files):
    """Source folder with two real images and one file that cannot be previewed."""
    return create_test_files([
        {'name': 'a_beach.jpg', 'image': 'JPEG', 'mtime': datetime(2023, 7, 14, 10, 30)},
        {'name': 'b_party.PNG', 'image': 'PNG', 'mtime': datetime(2022, 12, 31, 23, 0)},
        {'name': 'c_notes.txt', 'content': 'not a photo', 'mtime': datetime(2021, 3, 2, 8, 0)},
    ])


@pytest.fixture
def test_config_path(tmp_path):
    """Test-specific config path, kept away from the real home folder."""
    return tmp_path / "config" / "config.yml"


@pytest.fixture
def cli_runner(monkeypatch, capsys):
    """Create a CLI runner that captures output and answers prompts from a script."""

    def run_cli(*args, config_path=None, responses=()):
        """Run phototriage CLI with given arguments.

        Args:
            *args: Command line arguments (source, dest, --flags, etc)
            config_path: Optional config path for test isolation
            responses: Answers fed to console.input, in order

        Returns:
            CliResult with exit_code, output, and error
        """
        from phototriage.cli import main

        buffer = io.StringIO()
        console = Console(file=buffer, width=1000, color_system=None)
        answers = list(responses)

        def mock_input(prompt=""):
            console.print(prompt, end="")
            if not answers:
                raise EOFError
            return answers.pop(0)

        console.input = mock_input
        monkeypatch.setattr("phototriage.constants._console", console)
        monkeypatch.setattr(sys, "argv", [PROGRAM] + [str(a) for a in args])
        monkeypatch.setenv("COLUMNS", "1000")

        try:
            exit_code = main(config_path=config_path)
        except SystemExit as e:
            exit_code = e.code if e.code is not None else 0

        captured = capsys.readouterr()
        return CliResult(
            exit_code=exit_code,
            output=captured.out + buffer.getvalue(),
            error=captured.err,
        )

    return run_cli
