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

from dataclasses import dataclass, field
from pathlib import Path

from lintscope.changes import ChangeScope

DEFAULT_CONFIG_NAME = ".lintscope.toml"


@dataclass(frozen=True)
class RunConfig:
    config_path: Path = Path(DEFAULT_CONFIG_NAME)
    skip: frozenset[str] | None = None
    take: frozenset[str] | None = None
    scope: ChangeScope = field(default_factory=ChangeScope)
    vcs: str | None = None  # backend name; detected when None
