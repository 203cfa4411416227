"""Shared fixtures: a fake encoder in place of FFmpeg."""

import subprocess
from pathlib import Path

import pytest


class FakeEncoder:
    """Records encoder commands and writes a fixed-size output file."""

    def __init__(self, output_size: int = 524288, returncode: int = 0, write_output: bool = True):
        self.output_size = output_size
        self.returncode = returncode
        self.write_output = write_output
        self.commands = []

    def __call__(self, command, **kwargs):
        self.commands.append(list(command))
        if self.write_output:
            Path(command[-1]).write_bytes(b"\0" * self.output_size)
        return subprocess.CompletedProcess(command, self.returncode, "", "encoder error output")


@pytest.fixture
def fake_encoder(monkeypatch):
    encoder = FakeEncoder()
    monkeypatch.setattr(subprocess, "run", encoder)
    return encoder


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Run inside tmp_path with an empty 'videos' source folder."""
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "videos"
    source.mkdir()
    return tmp_path
