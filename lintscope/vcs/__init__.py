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

from lintscope.vcs.base import ChangeSet, CommandVCS, RepositoryHandle, VersionControl, resolve_changed_paths
from lintscope.vcs.git import GitVCS
from lintscope.vcs.registry import BACKENDS, detect_vcs, get_vcs
from lintscope.vcs.runner import CommandResult, ProcessRunner, SubprocessRunner
from lintscope.vcs.sapling import SaplingVCS
from lintscope.vcs.status import parse_name_status_z, parse_status_output

__all__ = [
    "BACKENDS",
    "ChangeSet",
    "CommandResult",
    "CommandVCS",
    "GitVCS",
    "ProcessRunner",
    "RepositoryHandle",
    "SaplingVCS",
    "SubprocessRunner",
    "VersionControl",
    "detect_vcs",
    "get_vcs",
    "parse_name_status_z",
    "parse_status_output",
    "resolve_changed_paths",
]
