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

from dataclasses import dataclass

from lintscope.config.types import DRYRUN_PLACEHOLDER, LintConfig, LinterRecord
from lintscope.errors import ConfigError, MissingDryRunPlaceholder, SchemaError


@dataclass(frozen=True, slots=True)
class DefaultLintConfigValidator:
    """
    Semantic validation of a structurally valid LintConfig.

    Returns every problem found, in file order; the loader decides which one
    to raise.
    """

    def validate(self, config: LintConfig) -> list[ConfigError]:
        errors: list[ConfigError] = []
        path = str(config.path)
        seen: set[str] = set()

        for record in config.linters:
            if record.name in seen:
                errors.append(
                    SchemaError(
                        path,
                        f"duplicate linter name '{record.name}'",
                        details={"linter": record.name},
                    )
                )
            seen.add(record.name)

            if len(record.include_patterns) == 0:
                errors.append(
                    SchemaError(
                        path,
                        f"linter '{record.name}' has no include_patterns. Provide at least one glob pattern.",
                        details={"linter": record.name},
                    )
                )

            if not self._has_dryrun_placeholder(record):
                errors.append(MissingDryRunPlaceholder(record.name, path=path))

        return errors

    def _has_dryrun_placeholder(self, record: LinterRecord) -> bool:
        # no init args means nothing to dry-run
        if record.init_args is None:
            return True
        return any(DRYRUN_PLACEHOLDER in arg for arg in record.init_args)
