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
from typing import Final

from lintscope.errors import NotARepository
from lintscope.vcs.base import CommandVCS, RepositoryHandle, VersionControl
from lintscope.vcs.git import GitVCS
from lintscope.vcs.runner import ProcessRunner, SubprocessRunner
from lintscope.vcs.sapling import SaplingVCS

logger = logging.getLogger(__name__)

BACKENDS: Final[dict[str, type[CommandVCS]]] = {
    "git": GitVCS,
    "sapling": SaplingVCS,
}

ALIASES: Final[dict[str, str]] = {
    "sl": "sapling",
    "hg": "sapling",
}

# Sapling can sit on top of a git checkout, so it is asked first.
DETECTION_ORDER: Final[tuple[str, ...]] = ("sapling", "git")


def get_vcs(name: str, runner: ProcessRunner | None = None) -> VersionControl:
    """
    Look a backend up by name ("git", "sapling", or an alias).

    Raises ValueError for unknown names.
    """
    key = ALIASES.get(name.lower(), name.lower())
    if key not in BACKENDS:
        raise ValueError(f"Unknown VCS backend '{name}'. Available: {sorted(BACKENDS)}.")
    return BACKENDS[key](runner=runner or SubprocessRunner())


def detect_vcs(runner: ProcessRunner | None = None) -> tuple[VersionControl, RepositoryHandle]:
    """
    Pick the backend that recognizes the current directory.

    Returns the backend together with the handle it opened, so the root
    discovery command does not run twice.
    """
    runner = runner or SubprocessRunner()
    reasons: list[str] = []
    for key in DETECTION_ORDER:
        vcs = BACKENDS[key](runner=runner)
        try:
            handle = vcs.open()
        except NotARepository as e:
            logger.debug(f"{key}: {e.reason}")
            reasons.append(f"{key}: {e.reason}")
            continue
        return vcs, handle

    raise NotARepository("/".join(DETECTION_ORDER), "; ".join(reasons))
