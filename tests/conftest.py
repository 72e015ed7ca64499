"""Shared fixtures for cmdspec tests."""

from __future__ import annotations

from typing import Any

import pytest

from cmdspec.options import CommandSpec, command, flag, int32, rest


class Recorder:
    """Collects callback invocations in call order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def hook(self, label: str):
        def record(*values: Any) -> None:
            self.calls.append((label, values[0] if values else None))

        return record


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def demo_spec(recorder: Recorder) -> CommandSpec:
    return command(
        "demo",
        [
            flag("-v", recorder.hook("verbose"), "be verbose"),
            int32("-n <int>", recorder.hook("count"), "how many"),
            rest("files...", recorder.hook("files"), "input files"),
        ],
    )
