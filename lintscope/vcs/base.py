# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Lintscope Contributors
#
# This file is part of Lintscope.
#
# Lintscope is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Lintscope is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Protocol

from lintscope.errors import NotARepository, PathResolutionError, VcsCommandFailed
from lintscope.path import AbsPath
from lintscope.vcs.runner import CommandResult, ProcessRunner, SubprocessRunner
from lintscope.vcs.status import parse_status_output

logger = logging.getLogger(__name__)

ChangeSet = frozenset[AbsPath]


@dataclass(frozen=True, slots=True)
class RepositoryHandle:
    """
    Opened repository: the absolute root plus the backend that found it.

    Read-only; one handle can serve any number of queries.
    """

    root: AbsPath
    backend: str


class VersionControl(Protocol):
    """
    Version-control capability contract.

    Every query is an independent subprocess invocation and parse, so one
    handle may be queried from several threads.
    """

    @property
    def name(self) -> str:
        raise NotImplementedError()

    def open(self) -> RepositoryHandle:
        """Locate the repository root from the current directory."""
        raise NotImplementedError()

    def current_position(self, handle: RepositoryHandle) -> str:
        """Opaque identifier of the checked-out revision."""
        raise NotImplementedError()

    def merge_base(self, handle: RepositoryHandle, reference: str) -> str:
        """Nearest common ancestor of the current position and `reference`."""
        raise NotImplementedError()

    def changed_files(self, handle: RepositoryHandle, relative_to: str | None = None) -> ChangeSet:
        """Added/modified files, optionally relative to a baseline revision."""
        raise NotImplementedError()


@dataclass(frozen=True, slots=True)
class CommandVCS:
    """
    Shared plumbing for backends that shell out to a VCS binary.

    Subclasses only describe their command lines and which status codes mean
    "deleted"; running, decoding and parsing live here.
    """

    name: ClassVar[str] = "vcs"
    deleted_codes: ClassVar[frozenset[str]] = frozenset({"D"})

    runner: ProcessRunner = field(default_factory=SubprocessRunner)

    # Command lines (backend-specific)

    def root_command(self) -> list[str]:
        raise NotImplementedError()

    def position_command(self) -> list[str]:
        raise NotImplementedError()

    def merge_base_command(self, reference: str) -> list[str]:
        raise NotImplementedError()

    def status_commands(self, relative_to: str | None) -> list[list[str]]:
        raise NotImplementedError()

    def parse_status(self, output: str) -> dict[str, str]:
        return parse_status_output(output, self.deleted_codes)

    # Queries

    def open(self) -> RepositoryHandle:
        argv = self.root_command()
        try:
            result = self.runner.run(argv)
        except OSError as e:
            raise NotARepository(self.name, f"could not run {argv[0]}: {e}") from e

        if not result.ok:
            raise NotARepository(self.name, _failure_reason(result))

        try:
            root = result.stdout.decode("utf-8").strip()
        except UnicodeDecodeError as e:
            raise NotARepository(self.name, "root output is not valid UTF-8") from e

        if not root:
            raise NotARepository(self.name, "root command printed nothing")

        try:
            root_path = AbsPath(Path(root))
        except (FileNotFoundError, ValueError) as e:
            raise NotARepository(self.name, str(e)) from e
        if not root_path.is_dir():
            raise NotARepository(self.name, f"root is not a directory: {root}")

        logger.debug(f"Found {self.name} repository at {root_path}")
        return RepositoryHandle(root=root_path, backend=self.name)

    def current_position(self, handle: RepositoryHandle) -> str:
        return self._identifier(handle, self.position_command())

    def merge_base(self, handle: RepositoryHandle, reference: str) -> str:
        return self._identifier(handle, self.merge_base_command(reference))

    def changed_files(self, handle: RepositoryHandle, relative_to: str | None = None) -> ChangeSet:
        entries: dict[str, str] = {}
        for argv in self.status_commands(relative_to):
            output = self._output(handle, argv)
            for path, line in self.parse_status(output).items():
                entries.setdefault(path, line)

        logger.debug(f"Changed files: {sorted(entries)}")
        return resolve_changed_paths(handle.root, entries)

    # Helpers

    def _output(self, handle: RepositoryHandle, argv: Sequence[str]) -> str:
        try:
            result = self.runner.run(argv, cwd=handle.root.path)
        except OSError as e:
            raise VcsCommandFailed(argv, "", reason=f"could not run {argv[0]}: {e}") from e

        if not result.ok:
            raise VcsCommandFailed(argv, _stderr_text(result), reason=f"exit status {result.returncode}")

        try:
            return result.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise VcsCommandFailed(argv, _stderr_text(result), reason="output is not valid UTF-8") from e

    def _identifier(self, handle: RepositoryHandle, argv: Sequence[str]) -> str:
        value = self._output(handle, argv).strip()
        # callers compare revisions by identity, so "" is never a valid answer
        if not value:
            raise VcsCommandFailed(argv, "", reason="empty output")
        return value


def resolve_changed_paths(root: AbsPath, entries: Mapping[str, str]) -> ChangeSet:
    """
    Join root-relative paths onto the repository root.

    Raises PathResolutionError (carrying the status line) for any path that
    does not exist.
    """
    resolved: set[AbsPath] = set()
    for rel, line in entries.items():
        try:
            resolved.add(AbsPath.of(rel, base=root))
        except (FileNotFoundError, ValueError) as e:
            raise PathResolutionError(line, str(e)) from e
    return frozenset(resolved)


def _stderr_text(result: CommandResult) -> str:
    return result.stderr.decode("utf-8", errors="replace")


def _failure_reason(result: CommandResult) -> str:
    stderr = _stderr_text(result).strip()
    reason = f"exit status {result.returncode}"
    return f"{reason}: {stderr}" if stderr else reason
