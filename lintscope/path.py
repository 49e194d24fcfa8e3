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

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True, order=True)
class AbsPath:
    """
    A filesystem path that is absolute and exists.

    Every file reference crossing the core boundary uses this type, so a path
    never silently depends on the process working directory.
    """

    path: Path

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))
        if not self.path.is_absolute():
            raise ValueError(f"Path is not absolute: {self.path}")
        if not self.path.exists():
            raise FileNotFoundError(f"Path does not exist: {self.path}")
        # canonical form, so a symlinked checkout compares equal to the VCS root
        object.__setattr__(self, "path", self.path.resolve(strict=True))

    @classmethod
    def of(cls, raw: str | os.PathLike[str], base: "str | os.PathLike[str] | AbsPath | None" = None) -> "AbsPath":
        """
        Build an AbsPath from a possibly relative path.

        Relative paths are joined onto `base` (or the current directory).
        The result is canonical: symlinks and `..` segments are resolved.
        """
        p = Path(raw)
        if not p.is_absolute():
            anchor = Path(base.path if isinstance(base, AbsPath) else (base or os.getcwd()))
            p = anchor / p
        return cls(p)

    def join(self, other: str | os.PathLike[str]) -> Path:
        return self.path / other

    def relative_to(self, other: "AbsPath") -> Path | None:
        """Path relative to `other`, or None if this path is not below it."""
        try:
            return self.path.relative_to(other.path)
        except ValueError:
            return None

    @property
    def parent(self) -> "AbsPath":
        return AbsPath(self.path.parent)

    def is_dir(self) -> bool:
        return self.path.is_dir()

    def __fspath__(self) -> str:
        return str(self.path)

    def __str__(self) -> str:
        return str(self.path)
