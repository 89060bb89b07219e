"""Tests for routetree.cli — entrypoint, routes listing, URL generation."""

import json
import sys
import types
from pathlib import Path

import pytest

from routetree.cli import main
from routetree.cli._resolve import resolve_namespace
from routetree.cli._url import parse_params


def _index() -> str:
    return "index"


def _edit() -> str:
    return "edit"


def _login() -> str:
    return "login"


@pytest.fixture
def _fake_handlers(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake controllers module on sys.modules."""
    mod = types.ModuleType("_fake_routetree_handlers")
    mod.index = _index  # type: ignore[attr-defined]
    mod.handlers = {  # type: ignore[attr-defined]
        "index": _index,
        "social": {"edit": _edit},
        "common": {"login": _login},
    }
    monkeypatch.setitem(sys.modules, "_fake_routetree_handlers", mod)


@pytest.fixture
def tree_file(tmp_path: Path) -> Path:
    path = tmp_path / "routes.json"
    path.write_text(
        json.dumps(
            {
                "/": "index",
                "/social": {
                    "Required": {"prefix": ["common.login"]},
                    "get,post/edit/:user/:tab?": "social.edit",
                },
            }
        )
    )
    return path


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0

    def test_url_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["url", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_tree(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_routes_missing_handlers(self, tree_file: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tree_file)])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "routetree" in capsys.readouterr().out


@pytest.mark.usefixtures("_fake_handlers")
class TestResolveNamespace:
    def test_module(self) -> None:
        ns = resolve_namespace("_fake_routetree_handlers")
        assert ns is sys.modules["_fake_routetree_handlers"]

    def test_attribute(self) -> None:
        ns = resolve_namespace("_fake_routetree_handlers:handlers")
        assert isinstance(ns, dict)

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_namespace("nonexistent_module_xyz")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_namespace("_fake_routetree_handlers:nope")


@pytest.mark.usefixtures("_fake_handlers")
class TestRoutesCommand:
    def test_table(self, tree_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", str(tree_file), "--handlers", "_fake_routetree_handlers:handlers"])
        out = capsys.readouterr().out.splitlines()
        assert out[0].split() == ["METHOD", "PATH", "HANDLERS"]
        assert set(out[1]) == {"="}
        assert len(out[1]) == len(out[0])
        assert out[2].split() == ["GET", "/", "index"]
        assert out[3].split() == ["GET", "/social/edit/:user/:tab?", "common.login", "->", "social.edit"]
        assert out[4].split()[0] == "POST"

    def test_default_method(self, tree_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "routes",
                str(tree_file),
                "--handlers",
                "_fake_routetree_handlers:handlers",
                "--default-method",
                "put",
            ]
        )
        out = capsys.readouterr().out.splitlines()
        assert out[2].split()[:2] == ["PUT", "/"]

    def test_empty_tree(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "empty.json"
        path.write_text("{}")
        main(["routes", str(path), "--handlers", "_fake_routetree_handlers"])
        assert "No routes registered." in capsys.readouterr().out

    def test_unresolved_exits_one(self, tree_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tree_file), "--handlers", "_fake_routetree_handlers"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_missing_file_exits_one(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path / "nope.json"), "--handlers", "_fake_routetree_handlers"])
        assert exc_info.value.code == 1

    def test_invalid_default_method_exits_one(self, tree_file: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(
                [
                    "routes",
                    str(tree_file),
                    "--handlers",
                    "_fake_routetree_handlers:handlers",
                    "--default-method",
                    "patch",
                ]
            )
        assert exc_info.value.code == 1


@pytest.mark.usefixtures("_fake_handlers")
class TestUrlCommand:
    def test_url(self, tree_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(
            [
                "url",
                str(tree_file),
                "social.edit",
                "user=ada",
                "tab=posts",
                "--handlers",
                "_fake_routetree_handlers:handlers",
            ]
        )
        assert capsys.readouterr().out.strip() == "/social/edit/ada/posts"

    def test_missing_parameter(self, tree_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["url", str(tree_file), "social.edit", "--handlers", "_fake_routetree_handlers:handlers"])
        assert exc_info.value.code == 1
        assert "Missing required parameter(s)" in capsys.readouterr().err

    def test_bad_pair(self, tree_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["url", str(tree_file), "index", "oops", "--handlers", "_fake_routetree_handlers:handlers"])
        assert exc_info.value.code == 1
        assert "KEY=VALUE" in capsys.readouterr().err


class TestParseParams:
    def test_pairs(self) -> None:
        assert parse_params(["a=1", "b=x=y"]) == {"a": "1", "b": "x=y"}

    def test_empty_value(self) -> None:
        assert parse_params(["a="]) == {"a": ""}

    def test_invalid(self) -> None:
        with pytest.raises(ValueError, match="KEY=VALUE"):
            parse_params(["=1"])
