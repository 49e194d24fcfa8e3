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
from collections.abc import Mapping
from dataclasses import dataclass, field

from lintscope.changes import ChangeSetResolver
from lintscope.config.loader import DefaultLintConfigLoader, build_linters
from lintscope.config.types import LinterDefinition
from lintscope.core.config import RunConfig
from lintscope.path import AbsPath
from lintscope.selection import select_linters
from lintscope.vcs.base import ChangeSet
from lintscope.vcs.registry import get_vcs
from lintscope.vcs.runner import ProcessRunner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LintPlan:
    """
    What a run would do: the selected linters and, when a file scope was
    resolved, the files each linter receives.

    `files` is None when every file is in scope.
    """

    linters: tuple[LinterDefinition, ...]
    files: ChangeSet | None = None
    files_by_linter: Mapping[str, tuple[AbsPath, ...]] = field(default_factory=dict)

    def files_for(self, linter_name: str) -> tuple[AbsPath, ...] | None:
        if self.files is None:
            return None
        return self.files_by_linter.get(linter_name, ())

    def active_linters(self) -> tuple[LinterDefinition, ...]:
        """Linters with something to do (bypass linters always count)."""
        if self.files is None:
            return self.linters
        return tuple(
            linter for linter in self.linters if linter.bypass_file_filter or self.files_by_linter.get(linter.name)
        )


class DefaultLintPlanner:
    """
    The orchestrator. It wires loader, selector and change-set resolver.

    Errors from any stage propagate unchanged; a broken config or VCS query
    aborts the plan.
    """

    def __init__(self, runner: ProcessRunner | None = None) -> None:
        self.config_loader = DefaultLintConfigLoader()
        self.runner = runner

    def plan(self, cfg: RunConfig) -> LintPlan:
        # 1) Load + validate config, compile patterns
        config = self.config_loader.load(cfg.config_path)
        all_linters = build_linters(config)

        # 2) Apply --take / --skip
        linters = select_linters(all_linters, skip_names=cfg.skip, take_names=cfg.take)
        if not linters:
            logger.warning("No linters selected")
            return LintPlan(linters=())

        # 3) Resolve file scope
        resolver = self.make_resolver(cfg)
        files = resolver.resolve(cfg.scope)
        if files is None:
            return LintPlan(linters=linters)

        # 4) Intersect per-linter patterns with the scope
        files_by_linter = {linter.name: linter.filter_files(files) for linter in linters}
        for name, matched in files_by_linter.items():
            logger.debug(f"{name}: {len(matched)} file(s)")

        return LintPlan(linters=linters, files=files, files_by_linter=files_by_linter)

    def make_resolver(self, cfg: RunConfig) -> ChangeSetResolver:
        if cfg.vcs is None:
            return ChangeSetResolver(runner=self.runner)
        return ChangeSetResolver(get_vcs(cfg.vcs, runner=self.runner))
