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
from dataclasses import dataclass

from lintscope.errors import PathResolutionError
from lintscope.path import AbsPath
from lintscope.vcs.base import ChangeSet, RepositoryHandle, VersionControl
from lintscope.vcs.registry import detect_vcs
from lintscope.vcs.runner import ProcessRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChangeScope:
    """
    Which files a run should consider.

    At most one of the fields may be set; with none set the scope is the
    working copy changes relative to the current revision.
    """

    paths: tuple[str, ...] = ()
    revision: str | None = None
    merge_base_with: str | None = None
    all_files: bool = False

    def __post_init__(self) -> None:
        chosen = [
            name
            for name, value in (
                ("paths", bool(self.paths)),
                ("revision", self.revision is not None),
                ("merge_base_with", self.merge_base_with is not None),
                ("all_files", self.all_files),
            )
            if value
        ]
        if len(chosen) > 1:
            raise ValueError(f"Only one of paths/revision/merge_base_with/all_files may be set, got: {chosen}")


class ChangeSetResolver:
    """
    Computes the set of files in scope for change-relative linting.

    The repository is opened on first use and the handle is reused for every
    later query. When no backend is given, one is detected from the current
    directory.
    """

    def __init__(
        self,
        vcs: VersionControl | None = None,
        *,
        runner: ProcessRunner | None = None,
    ) -> None:
        self._vcs = vcs
        self._runner = runner
        self._handle: RepositoryHandle | None = None

    @property
    def vcs(self) -> VersionControl:
        self._ensure_open()
        assert self._vcs is not None
        return self._vcs

    @property
    def handle(self) -> RepositoryHandle:
        self._ensure_open()
        assert self._handle is not None
        return self._handle

    def changed_files(self, relative_to: str | None = None) -> ChangeSet:
        return self.vcs.changed_files(self.handle, relative_to)

    def changed_since_merge_base(self, reference: str) -> ChangeSet:
        base = self.vcs.merge_base(self.handle, reference)
        logger.debug(f"Merge base with {reference}: {base}")
        return self.changed_files(relative_to=base)

    def resolve(self, scope: ChangeScope) -> ChangeSet | None:
        """
        Resolve a scope to concrete files.

        Returns None for `all_files` (no restriction). Explicit paths never
        touch the VCS.
        """
        if scope.all_files:
            return None

        if scope.paths:
            return _explicit_paths(scope.paths)

        if scope.merge_base_with is not None:
            return self.changed_since_merge_base(scope.merge_base_with)

        return self.changed_files(relative_to=scope.revision)

    def _ensure_open(self) -> None:
        if self._handle is not None:
            return
        if self._vcs is None:
            self._vcs, self._handle = detect_vcs(self._runner)
        else:
            self._handle = self._vcs.open()


def _explicit_paths(raw_paths: tuple[str, ...]) -> ChangeSet:
    resolved: set[AbsPath] = set()
    for raw in raw_paths:
        try:
            resolved.add(AbsPath.of(raw))
        except (FileNotFoundError, ValueError) as e:
            raise PathResolutionError(raw, str(e)) from e
    return frozenset(resolved)
