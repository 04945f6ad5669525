"""Tests for deletable/locked/creatable pre-flight predicates."""

from __future__ import annotations

import os

import pytest

from fsentry import File, permissions
from fsentry.permissions import STICKY_BIT, iter_parents
from tests.fakes.writer import StubWriteContext


class TestIterParents:
    def test_walks_to_root(self):
        paths = [p.path for p in iter_parents(File("/a/b/c.po"))]
        assert paths == ["/a/b", "/a", "/"]

    def test_relative_stops_before_dot(self):
        paths = [p.path for p in iter_parents(File("a/b/c.po"))]
        assert paths == ["a/b", "a"]


class TestDeletable:
    def test_parent_not_writable(self, tmp_path):
        (tmp_path / "a.po").write_text("x")
        context = StubWriteContext()
        assert not File(tmp_path / "a.po", context=context).deletable()

    def test_parent_not_writable_ignores_sticky(self, tmp_path, monkeypatch):
        os.chmod(tmp_path, 0o1777)
        (tmp_path / "a.po").write_text("x")
        monkeypatch.setattr(permissions, "effective_uid", lambda: os.stat(tmp_path / "a.po").st_uid)
        assert not File(tmp_path / "a.po", context=StubWriteContext()).deletable()

    def test_no_parent(self):
        assert not File("a.po", context=StubWriteContext({"."})).deletable()

    def test_writable_parent_without_sticky(self, tmp_path):
        os.chmod(tmp_path, 0o755)
        (tmp_path / "a.po").write_text("x")
        context = StubWriteContext({str(tmp_path)})
        assert File(tmp_path / "a.po", context=context).deletable()


class TestStickyDeletable:
    @pytest.fixture
    def sticky_dir(self, tmp_path):
        os.chmod(tmp_path, 0o1777)
        (tmp_path / "a.po").write_text("x")
        yield tmp_path
        os.chmod(tmp_path, 0o755)

    def _file(self, sticky_dir, direct=True):
        context = StubWriteContext({str(sticky_dir)}, direct=direct)
        return File(sticky_dir / "a.po", context=context)

    def test_owner_of_file(self, sticky_dir, monkeypatch):
        owner = os.stat(sticky_dir / "a.po").st_uid
        monkeypatch.setattr(permissions, "effective_uid", lambda: owner)
        assert self._file(sticky_dir).deletable()

    def test_owner_of_neither(self, sticky_dir, monkeypatch):
        monkeypatch.setattr(permissions, "effective_uid", lambda: 424242)
        assert not self._file(sticky_dir).deletable()

    def test_owner_of_parent(self, sticky_dir, monkeypatch):
        parent_owner = os.stat(sticky_dir).st_uid
        monkeypatch.setattr(permissions, "effective_uid", lambda: parent_owner)
        monkeypatch.setattr(File, "uid", lambda self: 424243 if self.basename() == "a.po" else parent_owner)
        assert self._file(sticky_dir).deletable()

    def test_remote_backend_skips_check(self, sticky_dir, monkeypatch):
        monkeypatch.setattr(permissions, "effective_uid", lambda: 424242)
        assert self._file(sticky_dir, direct=False).deletable()

    def test_unknown_uid_skips_check(self, sticky_dir, monkeypatch):
        monkeypatch.setattr(permissions, "effective_uid", lambda: None)
        assert self._file(sticky_dir).deletable()

    def test_sticky_bit_constant(self):
        assert STICKY_BIT == 0o1000


class TestLocked:
    def test_existing_writable(self, tmp_path):
        (tmp_path / "a.po").write_text("x")
        context = StubWriteContext({str(tmp_path / "a.po")})
        assert not File(tmp_path / "a.po", context=context).locked()

    def test_existing_not_writable(self, tmp_path):
        (tmp_path / "a.po").write_text("x")
        assert File(tmp_path / "a.po", context=StubWriteContext({str(tmp_path)})).locked()

    def test_missing_with_writable_parent(self, tmp_path):
        context = StubWriteContext({str(tmp_path)})
        assert not File(tmp_path / "new.po", context=context).locked()

    def test_missing_with_read_only_parent(self, tmp_path):
        assert File(tmp_path / "new.po", context=StubWriteContext()).locked()

    def test_missing_without_parent(self):
        assert File("new.po", context=StubWriteContext()).locked()


class TestCreatable:
    def test_first_existing_ancestor_writable(self, tmp_path):
        context = StubWriteContext({str(tmp_path)})
        assert File(tmp_path / "x" / "y" / "z.po", context=context).creatable()

    def test_first_existing_ancestor_not_writable(self, tmp_path):
        # only a non-existing ancestor is writable; the walk stops at tmp_path
        context = StubWriteContext({str(tmp_path / "x")})
        assert not File(tmp_path / "x" / "y" / "z.po", context=context).creatable()

    def test_no_existing_ancestor(self):
        context = StubWriteContext({"nope"})
        assert not File("nope/deeper/z.po", context=context).creatable()


class TestEffectiveUid:
    def test_matches_process(self):
        from fsentry.posix import effective_uid

        assert effective_uid() == os.geteuid()

    def test_unknowable_without_posix_ids(self, monkeypatch):
        from fsentry.posix import effective_uid

        monkeypatch.delattr(os, "geteuid")
        assert effective_uid() is None
