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

"""
Glob patterns for linter include/exclude lists.

Dialect (case-sensitive, anchored at both ends):

  ?        any single character
  *        any sequence of characters, '/' included
  **       a whole path component only: `**`, `**/x`, `x/**`, `x/**/y`.
           `**/` matches zero or more directories; a trailing `/**`
           matches everything below the directory.
  [abc]    one of the listed characters; `a-z` ranges, `[!...]` negation.
           A `]` right after `[` or `[!` is a literal member.

Everything else is literal. There is no escape character: use `[*]` to match
a literal star.
"""

import os
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from lintscope.errors import PatternError


class _GlobSyntaxError(ValueError):
    pass


@dataclass(frozen=True, slots=True)
class PathPattern:
    raw: str
    regex: re.Pattern[str]

    def matches(self, path: str | os.PathLike[str]) -> bool:
        return self.regex.fullmatch(_as_posix(path)) is not None

    def __str__(self) -> str:
        return self.raw


# Compilation


def compile_pattern(raw: str) -> PathPattern:
    """
    Compile a single glob string.

    Raises PatternError when the pattern is malformed.
    """
    if not isinstance(raw, str):
        raise PatternError(repr(raw), "pattern must be a string")
    try:
        translated = _translate(raw)
    except _GlobSyntaxError as e:
        raise PatternError(raw, str(e)) from e
    return PathPattern(raw=raw, regex=re.compile(translated, re.DOTALL))


def compile_patterns(raws: Iterable[str], *, linter_name: str | None = None) -> tuple[PathPattern, ...]:
    """
    Compile a batch of glob strings.

    All or nothing: the first malformed pattern fails the whole batch.
    """
    compiled: list[PathPattern] = []
    for raw in raws:
        try:
            compiled.append(compile_pattern(raw))
        except PatternError as e:
            raise PatternError(e.raw_pattern, e.cause, linter_name=linter_name) from e
    return tuple(compiled)


# Matching helpers


def matches(pattern: PathPattern, path: str | os.PathLike[str]) -> bool:
    return pattern.matches(path)


def matches_any(patterns: Sequence[PathPattern], path: str | os.PathLike[str]) -> bool:
    value = _as_posix(path)
    return any(p.regex.fullmatch(value) is not None for p in patterns)


def _as_posix(path: str | os.PathLike[str]) -> str:
    value = os.fspath(path)
    if os.sep != "/":
        value = value.replace(os.sep, "/")
    return value


def _translate(pattern: str) -> str:
    out: list[str] = []
    i, n = 0, len(pattern)

    while i < n:
        c = pattern[i]

        if c == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            run = j - i
            if run > 2:
                raise _GlobSyntaxError("wildcards are either regular `*` or recursive `**`")
            if run == 1:
                out.append(".*")
                i = j
                continue

            starts_component = i == 0 or pattern[i - 1] == "/"
            ends_component = j == n or pattern[j] == "/"
            if not (starts_component and ends_component):
                raise _GlobSyntaxError("recursive wildcards must form a single path component")

            if j == n:
                out.append(".*")
            else:
                # swallow the separator: `**/` may match no directory at all
                out.append("(?:.*/)?")
                j += 1
            i = j
            continue

        if c == "?":
            out.append(".")
            i += 1
            continue

        if c == "[":
            cls, i = _translate_class(pattern, i)
            out.append(cls)
            continue

        out.append(re.escape(c))
        i += 1

    return "".join(out)


def _translate_class(pattern: str, start: int) -> tuple[str, int]:
    n = len(pattern)
    j = start + 1
    negate = False
    if j < n and pattern[j] == "!":
        negate = True
        j += 1

    members: list[str] = []
    first = True
    while True:
        if j >= n:
            raise _GlobSyntaxError("unterminated character class")
        ch = pattern[j]
        if ch == "]" and not first:
            break
        first = False

        if j + 2 < n and pattern[j + 1] == "-" and pattern[j + 2] != "]":
            lo, hi = ch, pattern[j + 2]
            if lo > hi:
                raise _GlobSyntaxError(f"invalid range {lo}-{hi}")
            members.append(f"{re.escape(lo)}-{re.escape(hi)}")
            j += 3
        else:
            members.append(re.escape(ch))
            j += 1

    prefix = "^" if negate else ""
    return f"[{prefix}{''.join(members)}]", j + 1
