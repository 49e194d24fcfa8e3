"""Shared fixtures: a scripted process runner and a throwaway repository tree."""

from collections.abc import Sequence
from pathlib import Path

import pytest
from lintscope.vcs.runner import CommandResult


class FakeRunner:
    """
    ProcessRunner that answers from a script instead of spawning processes.

    Unscripted commands behave like a missing binary (OSError).
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, ...], CommandResult | OSError] = {}
        self.calls: list[tuple[tuple[str, ...], Path | None]] = []

    def add(
        self,
        argv: Sequence[str],
        stdout: str | bytes = "",
        returncode: int = 0,
        stderr: str = "",
    ) -> "FakeRunner":
        out = stdout.encode("utf-8") if isinstance(stdout, str) else stdout
        self.responses[tuple(argv)] = CommandResult(
            argv=tuple(argv),
            returncode=returncode,
            stdout=out,
            stderr=stderr.encode("utf-8"),
        )
        return self

    def fail_to_start(self, argv: Sequence[str]) -> "FakeRunner":
        self.responses[tuple(argv)] = FileNotFoundError(2, "No such file or directory", argv[0])
        return self

    def run(self, argv: Sequence[str], cwd: Path | None = None) -> CommandResult:
        key = tuple(argv)
        self.calls.append((key, cwd))
        response = self.responses.get(key)
        if response is None:
            raise FileNotFoundError(2, "unscripted command", " ".join(argv))
        if isinstance(response, OSError):
            raise response
        return response

    def commands(self) -> list[tuple[str, ...]]:
        return [argv for argv, _ in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """A repository-shaped directory with a few source files."""
    root = tmp_path / "repo"
    for rel in ("src/a.rs", "src/new.rs", "src/lib.py", "docs/readme.md"):
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(f"// {rel}\n", encoding="utf-8")
    return root
