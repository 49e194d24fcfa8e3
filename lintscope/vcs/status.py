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
Parsing of VCS status output.

Grammar, one entry per line:

    <code>[<score>]<whitespace><path>[<TAB><new path>]

`code` is one non-space, non-digit character. `score` is the similarity
percentage git prints after R/C; when it is present the entry is a
rename/copy and the last tab-separated field is the surviving path.

Git is run with `-z` instead, see parse_name_status_z.
"""

import re
from collections.abc import Set

from lintscope.errors import PathResolutionError

_STATUS_LINE = re.compile(r"^(?P<code>[^\s\d])(?P<score>\d*)\s+(?P<path>.*\S.*)$")


def parse_status_output(output: str, deleted_codes: Set[str]) -> dict[str, str]:
    """
    Return {relative path: raw line} for every entry not marked deleted.

    Unknown codes are kept. Blank lines are skipped; any other line that
    does not fit the grammar raises PathResolutionError.
    """
    entries: dict[str, str] = {}
    for raw_line in output.split("\n"):
        line = raw_line.rstrip("\r")
        if not line.strip():
            continue

        m = _STATUS_LINE.match(line)
        if m is None:
            raise PathResolutionError(line, "unrecognized status line")

        if m.group("code") in deleted_codes:
            continue

        path = m.group("path")
        if m.group("score"):
            path = path.split("\t")[-1]

        entries.setdefault(path, line)
    return entries


_STATUS_FIELD = re.compile(r"^(?P<code>[^\s\d])(?P<score>\d*)$")


def parse_name_status_z(output: str, deleted_codes: Set[str]) -> dict[str, str]:
    """
    Parse NUL-separated `--name-status -z` output.

    Each record is a status field followed by one path, or by two paths when
    the status carries a score (rename/copy). Paths arrive verbatim, never
    quoted or escaped. The raw record is reported with its fields joined by
    tabs.
    """
    fields = output.split("\0")
    if fields and fields[-1] == "":
        fields.pop()

    entries: dict[str, str] = {}
    i = 0
    while i < len(fields):
        status = fields[i]
        m = _STATUS_FIELD.match(status)
        if m is None:
            raise PathResolutionError(status, "unrecognized status field")

        width = 2 if m.group("score") else 1
        paths = fields[i + 1 : i + 1 + width]
        record = "\t".join([status, *paths])
        if len(paths) < width or not all(paths):
            raise PathResolutionError(record, "incomplete status record")
        i += 1 + width

        if m.group("code") in deleted_codes:
            continue
        entries.setdefault(paths[-1], record)
    return entries
