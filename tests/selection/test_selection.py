from pathlib import Path

import pytest
from lintscope.config.types import LinterDefinition
from lintscope.path import AbsPath
from lintscope.patterns import compile_patterns
from lintscope.selection import get_linters_from_config, parse_name_set, select_linters

# Helpers

NAMES = ("FLAKE8", "MYPY", "CLANGFORMAT", "NOQA")


def linter(name: str, config_path: AbsPath) -> LinterDefinition:
    return LinterDefinition(
        name=name,
        include_patterns=compile_patterns(["**/*.py"]),
        exclude_patterns=(),
        run_commands=(name.lower(),),
        config_path=config_path,
    )


@pytest.fixture
def all_linters(tmp_path: Path) -> tuple[LinterDefinition, ...]:
    cfg = tmp_path / ".lintscope.toml"
    cfg.write_text("", encoding="utf-8")
    return tuple(linter(n, AbsPath(cfg)) for n in NAMES)


def names(linters: tuple[LinterDefinition, ...]) -> list[str]:
    return [x.name for x in linters]


# No filters


def test_no_filters_returns_everything_in_order(all_linters):
    assert names(select_linters(all_linters)) == list(NAMES)


# --skip


@pytest.mark.parametrize("skipped", NAMES)
def test_skip_excludes_exactly_one_and_keeps_order(all_linters, skipped: str):
    result = select_linters(all_linters, skip_names={skipped})
    assert names(result) == [n for n in NAMES if n != skipped]


# --take


@pytest.mark.parametrize("taken", NAMES)
def test_take_keeps_exactly_one(all_linters, taken: str):
    assert names(select_linters(all_linters, take_names={taken})) == [taken]


def test_take_order_comes_from_config_not_from_argument(all_linters):
    result = select_linters(all_linters, take_names={"NOQA", "FLAKE8", "CLANGFORMAT"})
    assert names(result) == ["FLAKE8", "CLANGFORMAT", "NOQA"]


# --take + --skip


@pytest.mark.parametrize("name", NAMES)
def test_name_in_take_and_skip_is_excluded(all_linters, name: str):
    assert select_linters(all_linters, skip_names={name}, take_names={name}) == ()


def test_take_then_skip(all_linters):
    result = select_linters(all_linters, skip_names={"MYPY"}, take_names={"MYPY", "NOQA"})
    assert names(result) == ["NOQA"]


# Unknown names are ignored


def test_unknown_take_name_yields_empty_selection(all_linters):
    assert select_linters(all_linters, take_names={"DOES_NOT_EXIST"}) == ()


def test_unknown_skip_name_is_silently_ignored(all_linters):
    result = select_linters(all_linters, skip_names={"DOES_NOT_EXIST"})
    assert names(result) == list(NAMES)


def test_unknown_names_mixed_with_known(all_linters):
    result = select_linters(all_linters, skip_names={"TYPO", "NOQA"}, take_names={"MYPY", "NOQA", "ALSO_TYPO"})
    assert names(result) == ["MYPY"]


def test_empty_take_set_selects_nothing(all_linters):
    assert select_linters(all_linters, take_names=frozenset()) == ()


# parse_name_set


def test_parse_name_set():
    assert parse_name_set(None) is None
    assert parse_name_set("CLANGFORMAT,NOQA") == frozenset({"CLANGFORMAT", "NOQA"})
    assert parse_name_set(" A , B ,,") == frozenset({"A", "B"})
    assert parse_name_set("") == frozenset()


# get_linters_from_config


def test_get_linters_from_config(tmp_path: Path):
    cfg = tmp_path / ".lintscope.toml"
    cfg.write_text(
        "\n".join(
            f'[[linter]]\nname = "{n}"\ninclude_patterns = ["*.py"]\nargs = ["{n.lower()}"]\n' for n in NAMES
        ),
        encoding="utf-8",
    )
    result = get_linters_from_config(cfg, skip_names=parse_name_set("NOQA"), take_names=parse_name_set("NOQA,MYPY"))
    assert names(result) == ["MYPY"]
