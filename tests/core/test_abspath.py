import os
from pathlib import Path

import pytest
from lintscope.path import AbsPath


def test_abspath_requires_existing_path(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        AbsPath(tmp_path / "missing.txt")


def test_abspath_requires_absolute_path():
    with pytest.raises(ValueError):
        AbsPath(Path("relative.txt"))


def test_abspath_accepts_strings(tmp_path: Path):
    assert AbsPath(str(tmp_path)).path == tmp_path  # type: ignore[arg-type]


def test_of_joins_relative_onto_base(tmp_path: Path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "b.txt").write_text("")
    base = AbsPath(tmp_path)

    assert AbsPath.of("a/b.txt", base=base).path == tmp_path / "a" / "b.txt"
    assert AbsPath.of("a/../a/b.txt", base=tmp_path).path == tmp_path / "a" / "b.txt"


def test_of_uses_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / "x.py").write_text("")
    monkeypatch.chdir(tmp_path)
    assert AbsPath.of("x.py").path.samefile(tmp_path / "x.py")


def test_equality_hashing_and_order(tmp_path: Path):
    (tmp_path / "a.py").write_text("")
    (tmp_path / "b.py").write_text("")
    a1 = AbsPath(tmp_path / "a.py")
    a2 = AbsPath.of("a.py", base=tmp_path)
    b = AbsPath(tmp_path / "b.py")

    assert a1 == a2
    assert len({a1, a2, b}) == 2
    assert sorted([b, a1]) == [a1, b]


def test_relative_to_and_fspath(tmp_path: Path):
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "m.py").write_text("")
    root = AbsPath(tmp_path)
    other = AbsPath(tmp_path / "pkg")
    p = AbsPath(tmp_path / "pkg" / "m.py")

    assert p.relative_to(root) == Path("pkg/m.py")
    assert root.relative_to(other) is None
    assert os.fspath(p) == str(tmp_path / "pkg" / "m.py")
    assert p.parent == other


def test_symlinks_resolve_to_canonical_path(tmp_path: Path):
    real = tmp_path / "real"
    (real / "src").mkdir(parents=True)
    (real / "src" / "a.py").write_text("")
    link = tmp_path / "link"
    link.symlink_to(real, target_is_directory=True)

    assert AbsPath(link / "src" / "a.py") == AbsPath(real / "src" / "a.py")
    assert AbsPath.of("src/a.py", base=link).relative_to(AbsPath(real)) == Path("src/a.py")
    assert AbsPath(link).path == real
