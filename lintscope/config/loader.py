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

import json
import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import yaml

from lintscope.config.types import LintConfig, LinterDefinition, LinterRecord
from lintscope.config.validator import DefaultLintConfigValidator
from lintscope.errors import ConfigNotFound, SchemaError
from lintscope.path import AbsPath
from lintscope.patterns import compile_patterns

logger = logging.getLogger(__name__)

LINTERS_KEY = "linter"


class DefaultLintConfigLoader:
    """
    Loads a LintConfig from .lintscope.toml / .yaml / .yml / .json

    All formats carry a list of linter records under the `linter` key.
    """

    def __init__(self, validator: DefaultLintConfigValidator | None = None) -> None:
        self.validator = validator or DefaultLintConfigValidator()

    def load(self, path: str | os.PathLike[str] | AbsPath) -> LintConfig:
        if isinstance(path, AbsPath):
            config_path = path
        else:
            try:
                config_path = AbsPath.of(path)
            except (FileNotFoundError, ValueError) as e:
                raise ConfigNotFound(str(path), "file does not exist") from e

        if config_path.is_dir():
            raise ConfigNotFound(str(config_path), "path is a directory")

        data = self._read_config_file(config_path)

        if not isinstance(data, dict):
            raise SchemaError(str(config_path), "config root must be a mapping/table")
        if LINTERS_KEY not in data:
            raise SchemaError(str(config_path), f"missing field `{LINTERS_KEY}`")

        raw_linters = data[LINTERS_KEY]
        if not isinstance(raw_linters, list):
            raise SchemaError(str(config_path), f"`{LINTERS_KEY}` must be a list of tables")

        records = tuple(self._parse_record(config_path, idx, item) for idx, item in enumerate(raw_linters))
        config = LintConfig(path=config_path, linters=records)

        errors = self.validator.validate(config)
        if errors:
            raise errors[0]

        return config

    def _read_config_file(self, path: AbsPath) -> Any:
        suffix = path.path.suffix.lower()
        try:
            raw = path.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise SchemaError(str(path), f"file is not valid UTF-8: {e}") from e
        except OSError as e:
            raise ConfigNotFound(str(path), e.strerror or str(e)) from e

        if suffix == ".json":
            try:
                return json.loads(raw)
            except json.JSONDecodeError as e:
                raise SchemaError(str(path), str(e)) from e

        if suffix in (".yaml", ".yml"):
            try:
                return yaml.safe_load(raw)
            except yaml.YAMLError as e:
                raise SchemaError(str(path), str(e)) from e

        # .toml and anything else
        try:
            return tomllib.loads(raw)
        except tomllib.TOMLDecodeError as e:
            raise SchemaError(str(path), str(e)) from e

    def _parse_record(self, path: AbsPath, idx: int, raw: Any) -> LinterRecord:
        if not isinstance(raw, dict):
            raise SchemaError(str(path), f"linter entry #{idx} must be a table/mapping")

        name = raw.get("name")
        if not isinstance(name, str) or not name.strip():
            raise SchemaError(str(path), f"linter entry #{idx}: `name` must be a non-empty string")

        include_patterns = _required_str_list(path, name, raw, "include_patterns")
        args = _required_str_list(path, name, raw, "args")
        exclude_patterns = _optional_str_list(path, name, raw, "exclude_patterns")
        init_args = _optional_str_list(path, name, raw, "init_args")

        bypass = raw.get("bypass_matched_file_filter", False)
        if not isinstance(bypass, bool):
            raise SchemaError(
                str(path),
                f"linter '{name}': `bypass_matched_file_filter` must be a boolean",
                details={"linter": name},
            )

        return LinterRecord(
            name=name,
            include_patterns=include_patterns,
            args=args,
            exclude_patterns=exclude_patterns,
            init_args=init_args,
            bypass_matched_file_filter=bypass,
        )


def _required_str_list(path: AbsPath, name: str, raw: dict[str, Any], key: str) -> tuple[str, ...]:
    if key not in raw:
        raise SchemaError(str(path), f"linter '{name}': missing field `{key}`", details={"linter": name})
    value = _optional_str_list(path, name, raw, key)
    if value is None:
        raise SchemaError(str(path), f"linter '{name}': `{key}` must not be null", details={"linter": name})
    return value


def _optional_str_list(path: AbsPath, name: str, raw: dict[str, Any], key: str) -> tuple[str, ...] | None:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise SchemaError(
            str(path),
            f"linter '{name}': `{key}` must be a list of strings",
            details={"linter": name, "field": key},
        )
    return tuple(value)


# Building runtime linters


def build_linters(config: LintConfig) -> tuple[LinterDefinition, ...]:
    """
    Compile every record's patterns and produce LinterDefinitions in file order.

    Raises PatternError on the first malformed glob.
    """
    linters: list[LinterDefinition] = []
    for record in config.linters:
        include = compile_patterns(record.include_patterns, linter_name=record.name)
        exclude = compile_patterns(record.exclude_patterns or (), linter_name=record.name)
        linters.append(
            LinterDefinition(
                name=record.name,
                include_patterns=include,
                exclude_patterns=exclude,
                run_commands=record.args,
                config_path=config.path,
                init_commands=record.init_args,
                bypass_file_filter=record.bypass_matched_file_filter,
            )
        )
    logger.debug(f"Found linters: {[linter.name for linter in linters]}")
    return tuple(linters)


def load_linters(path: str | Path | AbsPath) -> tuple[LinterDefinition, ...]:
    return build_linters(DefaultLintConfigLoader().load(path))
