"""Tests for settings validation and CLI parsing."""

import pytest
from pydantic import ValidationError

from shs.__main__ import build_parser, settings_from_args
from shs.config import Settings


class TestSettings:
    def test_defaults(self, root):
        s = Settings(root=root)
        assert s.root == root.resolve()
        assert s.sort_enabled is True
        assert s.cache_enabled is True
        assert s.index_enabled is False
        assert s.port == 8000

    def test_root_must_be_directory(self, root):
        with pytest.raises(ValidationError):
            Settings(root=root / "hello.txt")
        with pytest.raises(ValidationError):
            Settings(root=root / "missing")

    def test_port_range(self, root):
        with pytest.raises(ValidationError):
            Settings(root=root, port=70000)

    def test_threads_positive(self, root):
        with pytest.raises(ValidationError):
            Settings(root=root, threads=0)

    def test_try_file_must_exist(self, root):
        with pytest.raises(ValidationError):
            Settings(root=root, try_file="missing.html")
        s = Settings(root=root, try_file="hello.txt")
        assert s.try_file_path == root.resolve() / "hello.txt"

    def test_frozen(self, root):
        s = Settings(root=root)
        with pytest.raises(ValidationError):
            s.port = 9000

    def test_env_prefix(self, root, monkeypatch):
        monkeypatch.setenv("SHS_ROOT", str(root))
        monkeypatch.setenv("SHS_SORT_ENABLED", "false")
        monkeypatch.setenv("SHS_PORT", "9001")
        s = Settings()
        assert s.root == root.resolve()
        assert s.sort_enabled is False
        assert s.port == 9001


class TestCli:
    def test_flags(self, root):
        args = build_parser().parse_args(
            [str(root), "-i", "--nosort", "--nocache", "--cors", "-p", "9000", "--ip", "127.0.0.1"]
        )
        s = settings_from_args(args)
        assert s.root == root.resolve()
        assert s.index_enabled is True
        assert s.sort_enabled is False
        assert s.cache_enabled is False
        assert s.cors is True
        assert s.port == 9000
        assert s.host == "127.0.0.1"

    def test_try_file_alias(self, root):
        args = build_parser().parse_args([str(root), "--try-file-404", "hello.txt"])
        assert settings_from_args(args).try_file_path == root.resolve() / "hello.txt"

    def test_invalid_root_exits(self, root, capsys):
        from shs.__main__ import main

        with pytest.raises(SystemExit) as exc:
            main([str(root / "hello.txt")])
        assert exc.value.code == 2
