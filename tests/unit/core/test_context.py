"""Tests for the EnvkitContext."""

from pathlib import Path

import pytest

from envkit.core.context import EnvkitContext, create_context, find_repo_root
from envkit.core.host.real import RealHostPlatform
from envkit.core.repo_config import EnvkitConfig
from tests.fakes.host import FakeHostPlatform


def test_for_test_fills_defaults() -> None:
    host = FakeHostPlatform("Darwin")

    ctx = EnvkitContext.for_test(host=host)

    assert ctx.host is host
    assert ctx.repo_root == ctx.cwd
    assert ctx.config == EnvkitConfig()


def test_context_is_frozen() -> None:
    ctx = EnvkitContext.for_test(host=FakeHostPlatform())

    with pytest.raises(AttributeError):
        ctx.cwd = Path("/elsewhere")  # type: ignore[misc]


def test_find_repo_root_walks_up_to_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("", encoding="utf-8")
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert find_repo_root(nested) == tmp_path


def test_find_repo_root_stops_at_git_dir(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    nested = tmp_path / "a"
    nested.mkdir()

    assert find_repo_root(nested) == tmp_path


def test_create_context_reads_repo_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / ".git").mkdir()
    (tmp_path / "pyproject.toml").write_text(
        '[tool.envkit]\nexcludes = ["vendor/**"]\n', encoding="utf-8"
    )
    nested = tmp_path / "sub"
    nested.mkdir()
    monkeypatch.chdir(nested)

    ctx = create_context()

    assert ctx.cwd == nested
    assert ctx.repo_root == tmp_path
    assert ctx.config.excludes == ["vendor/**"]
    assert isinstance(ctx.host, RealHostPlatform)
