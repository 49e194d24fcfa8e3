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


@dataclass(frozen=True, slots=True)
class SaplingVCS(CommandVCS):
    """
    Sapling (`sl`) backend.

    `sl status` output looks like:

        M foo/bar.baz
        D src/lib.rs
        ? new_file.py

    R (removed) and ! (missing) are deletions too; the file is gone from the
    working copy either way.
    """

    name: ClassVar[str] = "sapling"
    deleted_codes: ClassVar[frozenset[str]] = frozenset({"D", "R", "!"})

    executable: ClassVar[str] = "sl"

    def root_command(self) -> list[str]:
        return [self.executable, "root"]

    def position_command(self) -> list[str]:
        return [self.executable, "whereami"]

    def merge_base_command(self, reference: str) -> list[str]:
        return [self.executable, "log", f"--rev=ancestor(., {reference})", "--template={node}"]

    def status_commands(self, relative_to: str | None) -> list[list[str]]:
        cmd = [self.executable, "status"]
        if relative_to is not None:
            cmd.append(f"--rev={relative_to}")
        return [cmd]
