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

from collections.abc import Iterable
from dataclasses import dataclass

from lintscope.path import AbsPath
from lintscope.patterns import PathPattern, matches_any

DRYRUN_PLACEHOLDER = "{{DRYRUN}}"


# Raw records (as written in the config file)


@dataclass(frozen=True, slots=True)
class LinterRecord:
    """
    One `[[linter]]` entry, after structural parsing but before patterns
    are compiled.
    """

    name: str
    include_patterns: tuple[str, ...]
    args: tuple[str, ...]
    exclude_patterns: tuple[str, ...] | None = None
    init_args: tuple[str, ...] | None = None
    bypass_matched_file_filter: bool = False


@dataclass(frozen=True, slots=True)
class LintConfig:
    """
    Parsed configuration file.

    Records keep file order; selection results inherit it.
    """

    path: AbsPath
    linters: tuple[LinterRecord, ...]

    def names(self) -> tuple[str, ...]:
        return tuple(r.name for r in self.linters)


# Runtime linter definition


@dataclass(frozen=True, slots=True)
class LinterDefinition:
    """
    A linter ready to be selected and matched against files.

    Immutable once built; patterns are already compiled.
    """

    name: str
    include_patterns: tuple[PathPattern, ...]
    exclude_patterns: tuple[PathPattern, ...]
    run_commands: tuple[str, ...]
    config_path: AbsPath
    init_commands: tuple[str, ...] | None = None
    bypass_file_filter: bool = False

    def matches_file(self, path: AbsPath) -> bool:
        """
        Per-file predicate: bypass, or (some include matches and no exclude matches).

        Paths below the config file's directory are matched relative to it.
        """
        if self.bypass_file_filter:
            return True
        candidate = path.relative_to(self.config_path.parent)
        if candidate is None:
            candidate = path.path
        if not matches_any(self.include_patterns, candidate):
            return False
        return not matches_any(self.exclude_patterns, candidate)

    def filter_files(self, paths: Iterable[AbsPath]) -> tuple[AbsPath, ...]:
        return tuple(sorted(p for p in paths if self.matches_file(p)))

    def render_init_args(self, dry_run: bool) -> tuple[str, ...]:
        if self.init_commands is None:
            return ()
        value = "1" if dry_run else "0"
        return tuple(arg.replace(DRYRUN_PLACEHOLDER, value) for arg in self.init_commands)
