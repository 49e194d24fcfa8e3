from pathlib import Path

import pytest
from lintscope.errors import PathResolutionError
from lintscope.path import AbsPath
from lintscope.vcs.base import resolve_changed_paths
from lintscope.vcs.status import parse_name_status_z, parse_status_output

DELETED = frozenset({"D"})


def test_parse_drops_deleted_and_strips_codes():
    out = "M  src/a.rs\nD  src/old.rs\n?  src/new.rs\n"
    entries = parse_status_output(out, DELETED)
    assert set(entries) == {"src/a.rs", "src/new.rs"}
    assert entries["src/a.rs"] == "M  src/a.rs"


def test_parse_accepts_tabs_and_single_space():
    entries = parse_status_output("M\tsrc/a.rs\nA src/b.rs", DELETED)
    assert set(entries) == {"src/a.rs", "src/b.rs"}


def test_parse_deduplicates():
    entries = parse_status_output("M a.py\nA a.py\nM a.py\n", DELETED)
    assert list(entries) == ["a.py"]
    assert entries["a.py"] == "M a.py"


def test_parse_keeps_unknown_codes():
    entries = parse_status_output("X weird.txt\nU conflict.txt\n", DELETED)
    assert set(entries) == {"weird.txt", "conflict.txt"}


def test_parse_skips_blank_lines_and_crlf():
    entries = parse_status_output("\r\nM a.py\r\n\n   \n", DELETED)
    assert set(entries) == {"a.py"}


def test_parse_rename_with_score_keeps_new_path():
    entries = parse_status_output("R100\told/name.py\tnew/name.py\nC75\tsrc.py\tcopy.py\n", DELETED)
    assert set(entries) == {"new/name.py", "copy.py"}


def test_parse_path_with_spaces():
    entries = parse_status_output("M  docs/my file.md\n", DELETED)
    assert set(entries) == {"docs/my file.md"}


def test_parse_backend_specific_deleted_codes():
    out = "R removed.py\n! missing.py\nM kept.py\n"
    assert set(parse_status_output(out, frozenset({"D", "R", "!"}))) == {"kept.py"}


@pytest.mark.parametrize("bad", ["Msrc/a.rs", "M", "12 file.py", "M    "])
def test_parse_rejects_lines_outside_grammar(bad: str):
    with pytest.raises(PathResolutionError) as ei:
        parse_status_output(bad, DELETED)
    assert ei.value.raw_line == bad.rstrip("\r")


def test_parse_empty_output():
    assert parse_status_output("", DELETED) == {}


# resolve_changed_paths


def test_resolve_joins_with_root(repo_root: Path):
    root = AbsPath(repo_root)
    result = resolve_changed_paths(root, {"src/a.rs": "M src/a.rs", "src/new.rs": "? src/new.rs"})
    assert result == frozenset({AbsPath(repo_root / "src/a.rs"), AbsPath(repo_root / "src/new.rs")})


def test_resolve_missing_file_fails_whole_call(repo_root: Path):
    root = AbsPath(repo_root)
    with pytest.raises(PathResolutionError) as ei:
        resolve_changed_paths(root, {"src/a.rs": "M src/a.rs", "src/gone.rs": "M src/gone.rs"})
    assert ei.value.raw_line == "M src/gone.rs"


# parse_name_status_z


def test_parse_z_keeps_paths_verbatim():
    out = "M\0src/a.rs\0A\0café.py\0A\0docs/my file.md\0A\0tab\there.py\0"
    entries = parse_name_status_z(out, DELETED)
    assert set(entries) == {"src/a.rs", "café.py", "docs/my file.md", "tab\there.py"}
    assert entries["café.py"] == "A\tcafé.py"


def test_parse_z_rename_takes_new_path_and_drops_deleted():
    out = "R100\0old name.py\0new name.py\0D\0gone.py\0C75\0src.py\0copy.py\0"
    entries = parse_name_status_z(out, DELETED)
    assert set(entries) == {"new name.py", "copy.py"}
    assert entries["new name.py"] == "R100\told name.py\tnew name.py"


def test_parse_z_empty_output():
    assert parse_name_status_z("", DELETED) == {}


@pytest.mark.parametrize("bad", ["M\0", "R100\0only-old.py\0", "12\0file.py\0", "M\0\0"])
def test_parse_z_rejects_incomplete_records(bad: str):
    with pytest.raises(PathResolutionError):
        parse_name_status_z(bad, DELETED)
