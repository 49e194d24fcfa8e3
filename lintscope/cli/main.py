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

import argparse
import logging
import sys
from pathlib import Path

from lintscope._version import __version__
from lintscope.changes import ChangeScope
from lintscope.cli.exitcodes import EXIT_ERROR, EXIT_OK
from lintscope.core.config import DEFAULT_CONFIG_NAME, RunConfig
from lintscope.core.engine import DefaultLintPlanner, LintPlan
from lintscope.errors import LintscopeError
from lintscope.selection import parse_name_set
from lintscope.vcs.registry import ALIASES, BACKENDS


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="lintscope", description="Lintscope: choose which linters run on which files")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose output (debug logging).")
    p.add_argument(
        "--config",
        default=DEFAULT_CONFIG_NAME,
        help=f"Path to a toml/yaml/json file defining which linters to run (default: {DEFAULT_CONFIG_NAME}).",
    )
    p.add_argument("--skip", default=None, help="Comma-separated list of linters to skip (e.g. --skip CLANGFORMAT,NOQA).")
    p.add_argument("--take", default=None, help="Comma-separated list of linters to run (opposite of --skip).")
    p.add_argument(
        "--vcs",
        choices=sorted([*BACKENDS, *ALIASES]),
        default=None,
        help="Version control backend (default: detect).",
    )

    scope = p.add_mutually_exclusive_group()
    scope.add_argument("--revision", default=None, help="Consider files changed relative to this revision.")
    scope.add_argument(
        "--merge-base-with",
        dest="merge_base_with",
        default=None,
        help="Consider files changed since the merge base with this revision.",
    )
    scope.add_argument("--all-files", dest="all_files", action="store_true", help="Do not restrict files.")
    p.add_argument("paths", nargs="*", help="Explicit paths to consider instead of changed files.")

    return p


def render_plan(plan: LintPlan) -> str:
    if not plan.linters:
        return "No linters selected."

    width = max(len(linter.name) for linter in plan.linters)
    lines: list[str] = []
    for linter in plan.linters:
        files = plan.files_for(linter.name)
        if linter.bypass_file_filter:
            detail = "always (bypasses file filter)"
        elif files is None:
            detail = "all files"
        else:
            detail = f"{len(files)} file(s)"
        lines.append(f"{linter.name.ljust(width)}  {detail}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        scope = ChangeScope(
            paths=tuple(args.paths),
            revision=args.revision,
            merge_base_with=args.merge_base_with,
            all_files=args.all_files,
        )
        cfg = RunConfig(
            config_path=Path(args.config),
            skip=parse_name_set(args.skip),
            take=parse_name_set(args.take),
            scope=scope,
            vcs=args.vcs,
        )
        plan = DefaultLintPlanner().plan(cfg)
    except (LintscopeError, ValueError) as e:
        print(f"lintscope: error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(render_plan(plan))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
