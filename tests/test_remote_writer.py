"""Tests for RemoteWriteContext delegation to a TransferProvider."""

from __future__ import annotations

import os
from unittest.mock import MagicMock

import pytest

from fsentry import Directory, File, permissions
from fsentry.config.schema import WriterConfig
from fsentry.errors import WriteError
from fsentry.provider import TransferProvider
from fsentry.writers import RemoteWriteContext, create_write_context
from tests.fakes.transfer import FakeTransferProvider


@pytest.fixture
def provider():
    return FakeTransferProvider()


def _file(path, provider, **config) -> File:
    context = create_write_context(WriterConfig(mode="remote", **config), provider=provider)
    return File(path, context=context)


class TestProbes:
    def test_not_direct(self, provider):
        assert not RemoteWriteContext(provider).is_direct()

    def test_writable_asks_provider(self, provider, tmp_path):
        assert _file(tmp_path, provider).writable()
        provider.writable = False
        assert not _file(tmp_path, provider).writable()

    def test_writable_is_quiet_on_transport_error(self, provider, tmp_path):
        provider.broken = True
        assert not _file(tmp_path, provider).writable()

    def test_disabled_skips_provider(self, tmp_path):
        provider = MagicMock(spec=TransferProvider)
        assert not _file(tmp_path, provider, disabled=True).writable()
        provider.is_writable.assert_not_called()


class TestDelegation:
    def test_put_contents(self, provider, tmp_path):
        file = _file(tmp_path / "a.po", provider, file_mode=0o640)
        assert file.put_contents(b"abc") == 3
        assert provider.calls == [("put_contents", str(tmp_path / "a.po"), b"abc", 0o640)]

    def test_put_contents_without_extension(self, provider, tmp_path):
        _file(tmp_path / "Makefile", provider).put_contents(b"all:")
        assert provider.calls == [("put_contents", str(tmp_path / "Makefile"), b"all:", 0o644)]

    def test_chmod(self, provider, tmp_path):
        (tmp_path / "a.po").write_text("x")
        _file(tmp_path / "a.po", provider).chmod(0o600, recursive=True)
        assert provider.calls == [("chmod", str(tmp_path / "a.po"), 0o600, True)]

    def test_copy_and_move(self, provider, tmp_path):
        (tmp_path / "a.po").write_text("x")
        source = _file(tmp_path / "a.po", provider)
        copy = source.copy(str(tmp_path / "b.po"))
        copy.move(str(tmp_path / "c.po"))
        assert provider.calls == [
            ("copy", str(tmp_path / "a.po"), str(tmp_path / "b.po")),
            ("move", str(tmp_path / "b.po"), str(tmp_path / "c.po")),
        ]
        assert isinstance(copy.get_write_context(), RemoteWriteContext)
        assert copy.get_write_context().provider is provider

    def test_delete_directory(self, provider, tmp_path):
        (tmp_path / "d").mkdir()
        _file(tmp_path / "d", provider).delete()
        assert provider.calls == [("delete", str(tmp_path / "d"), True)]

    def test_mkdir_creates_missing_ancestors_top_down(self, provider, tmp_path):
        context = RemoteWriteContext(provider, WriterConfig(dir_mode=0o750))
        Directory(tmp_path / "a" / "b", context=context).mkdir()
        assert provider.calls == [
            ("mkdir", str(tmp_path / "a"), 0o750),
            ("mkdir", str(tmp_path / "a" / "b"), 0o750),
        ]
        assert (tmp_path / "a" / "b").is_dir()


class TestFailures:
    def test_rejected(self, provider, tmp_path):
        provider.reject = True
        with pytest.raises(WriteError, match="Failed to save"):
            _file(tmp_path / "a.po", provider).put_contents(b"x")

    def test_transport_error_is_chained(self, provider, tmp_path):
        (tmp_path / "a.po").write_text("x")
        provider.broken = True
        with pytest.raises(WriteError, match="connection reset") as exc:
            _file(tmp_path / "a.po", provider).delete()
        assert isinstance(exc.value.__cause__, ConnectionError)

    def test_existing_not_writable(self, provider, tmp_path):
        (tmp_path / "a.po").write_text("x")
        provider.writable = False
        with pytest.raises(WriteError, match="not writable"):
            _file(tmp_path / "a.po", provider).put_contents(b"x")
        assert provider.calls == []

    def test_remote_directory_rejected(self, provider, tmp_path, monkeypatch):
        monkeypatch.setattr(provider, "is_dir", lambda path: path == str(tmp_path / "a.po"))
        with pytest.raises(WriteError, match="Directory path"):
            _file(tmp_path / "a.po", provider).put_contents(b"x")
        assert provider.calls == []

    def test_mkdir_rejected(self, provider, tmp_path):
        provider.reject = True
        with pytest.raises(WriteError, match="Failed to create directory"):
            Directory(tmp_path / "a", context=RemoteWriteContext(provider)).mkdir()


def test_sticky_check_skipped_for_remote(provider, tmp_path, monkeypatch):
    os.chmod(tmp_path, 0o1777)
    (tmp_path / "a.po").write_text("x")
    monkeypatch.setattr(permissions, "effective_uid", lambda: 424242)
    try:
        assert _file(tmp_path / "a.po", provider).deletable()
    finally:
        os.chmod(tmp_path, 0o755)
