"""Tests for the watch-mode change filter."""

import threading

from context_frame import watcher
from context_frame.watcher import _RepositoryFilter, watch_repository


class TestRepositoryFilter:
    def test_ignores_dependency_and_vcs_dirs(self):
        accept = _RepositoryFilter()
        assert not accept(1, "/repo/node_modules/pkg/README.md")
        assert not accept(2, "/repo/.git/index")

    def test_keeps_context_directories(self):
        accept = _RepositoryFilter()
        assert accept(1, "/repo/.github/copilot-instructions.md")
        assert accept(2, "/repo/.claude/settings.json")
        assert accept(1, "/repo/CLAUDE.md")


def test_watch_repository_reports_batches(tmp_path, monkeypatch):
    calls = {}

    def fake_watch(path, **kwargs):
        calls.update(kwargs, path=path)
        yield {(2, str(tmp_path / "b.md")), (1, str(tmp_path / "a.md"))}

    monkeypatch.setattr(watcher, "watch", fake_watch)
    seen = []
    watch_repository(str(tmp_path), seen.append, stop_event=threading.Event())

    assert seen == [[str(tmp_path / "a.md"), str(tmp_path / "b.md")]]
    assert calls["debounce"] == 200
    assert calls["path"] == str(tmp_path.resolve())
