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
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """
    Completed external command: argv in, captured bytes out.
    """

    argv: tuple[str, ...]
    returncode: int
    stdout: bytes
    stderr: bytes = b""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProcessRunner(Protocol):
    """
    Runs one command to completion and captures its output.

    Implementations raise OSError when the executable cannot be started.
    """

    def run(self, argv: Sequence[str], cwd: Path | None = None) -> CommandResult:
        raise NotImplementedError()


@dataclass(frozen=True, slots=True)
class SubprocessRunner:
    """
    Default runner backed by subprocess.run.

    Blocks until the child exits; pipes are closed and the child reaped
    before returning. No timeout is applied.
    """

    def run(self, argv: Sequence[str], cwd: Path | None = None) -> CommandResult:
        logger.debug(f"Running: {' '.join(argv)} (cwd={cwd})")
        result = subprocess.run(
            list(argv),
            cwd=None if cwd is None else str(cwd),
            capture_output=True,
            check=False,
        )
        return CommandResult(
            argv=tuple(argv),
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
