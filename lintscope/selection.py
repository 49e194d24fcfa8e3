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
import os
from collections.abc import Iterable, Set

from lintscope.config.loader import load_linters
from lintscope.config.types import LinterDefinition
from lintscope.path import AbsPath

logger = logging.getLogger(__name__)


def select_linters(
    all_linters: Iterable[LinterDefinition],
    skip_names: Set[str] | None = None,
    take_names: Set[str] | None = None,
) -> tuple[LinterDefinition, ...]:
    """
    Apply --take, then --skip.

    Order always comes from the configuration file. A name present in both
    sets ends up skipped. Names that match no linter are ignored.
    """
    linters = tuple(all_linters)
    known = {linter.name for linter in linters}

    if take_names is not None:
        logger.debug(f"Taking linters: {sorted(take_names)}")
        _log_unknown("take", take_names, known)
        linters = tuple(linter for linter in linters if linter.name in take_names)

    if skip_names is not None:
        logger.debug(f"Skipping linters: {sorted(skip_names)}")
        _log_unknown("skip", skip_names, known)
        linters = tuple(linter for linter in linters if linter.name not in skip_names)

    return linters


def get_linters_from_config(
    config_path: str | os.PathLike[str] | AbsPath,
    skip_names: Set[str] | None = None,
    take_names: Set[str] | None = None,
) -> tuple[LinterDefinition, ...]:
    """Given options specified by the user, return the linters to run."""
    return select_linters(load_linters(config_path), skip_names=skip_names, take_names=take_names)


def parse_name_set(value: str | None) -> frozenset[str] | None:
    """
    Parse a comma-separated linter list (e.g. "CLANGFORMAT,NOQA").

    None stays None so "not given" differs from "given but empty".
    """
    if value is None:
        return None
    return frozenset(name.strip() for name in value.split(",") if name.strip())


def _log_unknown(flag: str, names: Set[str], known: Set[str]) -> None:
    unknown = sorted(n for n in names if n not in known)
    if unknown:
        logger.debug(f"Ignoring unknown linter names for --{flag}: {unknown}")
