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

from collections.abc import Mapping, Sequence
from typing import Any


class LintscopeError(Exception):
    """
    Base class for all errors raised by the selection core.

    These errors should be surfaced to users as configuration or repository
    issues, not as internal crashes. Every subclass is fatal to the current
    run; none of them is retried.
    """

    code: str
    message: str
    file: str | None = None
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "lintscope_error",
        file: str | None = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.file = file
        self.details = details

    def __str__(self) -> str:
        if self.file:
            return f"{self.file}: {self.message}"
        return self.message


# Configuration errors


class ConfigError(LintscopeError):
    """Raised when the linter configuration cannot be turned into linters."""

    pass


class ConfigNotFound(ConfigError):
    """Raised when the configuration file is missing or unreadable."""

    def __init__(self, path: str, reason: str | None = None) -> None:
        message = "Could not read linter config"
        if reason:
            message += f": {reason}"
        super().__init__(message, code="config_not_found", file=path)
        self.path = path


class SchemaError(ConfigError):
    """Raised when the configuration content is structurally invalid."""

    def __init__(self, path: str, diagnostic: str, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(
            f"Config file had invalid schema: {diagnostic}",
            code="invalid_schema",
            file=path,
            details=details,
        )
        self.path = path
        self.diagnostic = diagnostic


class MissingDryRunPlaceholder(ConfigError):
    """Raised when a linter defines init args without a {{DRYRUN}} token."""

    def __init__(self, linter_name: str, path: str | None = None) -> None:
        super().__init__(
            f"Config for linter {linter_name} defines init args but does not take a {{{{DRYRUN}}}} argument.",
            code="missing_dryrun_placeholder",
            file=path,
            details={"linter": linter_name},
        )
        self.linter_name = linter_name


class PatternError(ConfigError):
    """Raised when an include/exclude glob cannot be compiled."""

    def __init__(self, raw_pattern: str, cause: str, linter_name: str | None = None) -> None:
        message = f"Could not parse pattern {raw_pattern!r}: {cause}"
        if linter_name:
            message = f"Linter {linter_name}: {message}"
        super().__init__(
            message,
            code="invalid_pattern",
            details={"pattern": raw_pattern, "cause": cause, "linter": linter_name},
        )
        self.raw_pattern = raw_pattern
        self.cause = cause
        self.linter_name = linter_name


# Version-control errors


class VcsError(LintscopeError):
    """Raised when a version-control query fails."""

    pass


class NotARepository(VcsError):
    """Raised when repository root discovery fails."""

    def __init__(self, backend: str, reason: str) -> None:
        super().__init__(
            f"Failed to determine {backend} root: {reason}",
            code="not_a_repository",
            details={"backend": backend},
        )
        self.backend = backend
        self.reason = reason


class VcsCommandFailed(VcsError):
    """Raised when a VCS subprocess exits non-zero or produces unusable output."""

    def __init__(self, command: Sequence[str], stderr: str, reason: str | None = None) -> None:
        cmdline = " ".join(command)
        message = f"Command `{cmdline}` failed"
        if reason:
            message += f" ({reason})"
        if stderr.strip():
            message += f": {stderr.strip()}"
        super().__init__(message, code="vcs_command_failed", details={"command": list(command)})
        self.command = tuple(command)
        self.stderr = stderr


class PathResolutionError(VcsError):
    """Raised when a changed-file line cannot be turned into an existing absolute path."""

    def __init__(self, raw_line: str, reason: str) -> None:
        super().__init__(
            f"Failed to find file while gathering files to lint: {raw_line!r} ({reason})",
            code="path_resolution_error",
            details={"line": raw_line},
        )
        self.raw_line = raw_line
        self.reason = reason
