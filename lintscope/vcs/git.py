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

from dataclasses import dataclass
from typing import ClassVar

from lintscope.vcs.base import CommandVCS
from lintscope.vcs.status import parse_name_status_z

_NAME_STATUS = ["--ignore-submodules", "--no-commit-id", "--name-status", "-r", "-z"]


@dataclass(frozen=True, slots=True)
class GitVCS(CommandVCS):
    """
    Git backend.

    Changed files are the union of:
      - committed changes: `git diff-tree` between the baseline (or HEAD's
        parent) and HEAD
      - working tree changes: `git diff-index` against HEAD

    Both are reported with --name-status -z: NUL-separated records with
    unquoted paths. Renames/copies carry old and new path and contribute the
    new one.
    """

    name: ClassVar[str] = "git"
    deleted_codes: ClassVar[frozenset[str]] = frozenset({"D"})

    def root_command(self) -> list[str]:
        return ["git", "rev-parse", "--show-toplevel"]

    def position_command(self) -> list[str]:
        return ["git", "rev-parse", "HEAD"]

    def merge_base_command(self, reference: str) -> list[str]:
        return ["git", "merge-base", "HEAD", reference]

    def status_commands(self, relative_to: str | None) -> list[list[str]]:
        committed = ["git", "diff-tree", *_NAME_STATUS]
        if relative_to is not None:
            committed.append(relative_to)
        committed.append("HEAD")

        working_tree = ["git", "diff-index", *_NAME_STATUS, "HEAD"]
        return [committed, working_tree]

    def parse_status(self, output: str) -> dict[str, str]:
        return parse_name_status_z(output, self.deleted_codes)
