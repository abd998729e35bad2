"""Tests for file helpers and skip-glob matching."""

import pytest

from context_frame.config import DEFAULT_SKIP_PATTERNS
from context_frame.exceptions import FileAccessError
from context_frame.file_ops import safe_read_file, should_skip_path, to_posix, walk_files


class TestShouldSkipPath:
    @pytest.mark.parametrize(
        "path",
        [
            "node_modules",
            "node_modules/pkg/README.md",
            "packages/web/node_modules/x.md",
            ".git",
            ".git/HEAD",
            "dist/bundle.js",
        ],
    )
    def test_default_patterns_skip(self, path):
        assert should_skip_path(path, DEFAULT_SKIP_PATTERNS)

    @pytest.mark.parametrize(
        "path", ["CLAUDE.md", "docs/guide.md", ".github/copilot-instructions.md", "distribution.md"]
    )
    def test_default_patterns_keep(self, path):
        assert not should_skip_path(path, DEFAULT_SKIP_PATTERNS)

    def test_dot_names_match_like_any_other(self):
        assert should_skip_path(".claude/settings.json", [".claude/*"])

    def test_root_is_never_skipped(self):
        assert not should_skip_path("", DEFAULT_SKIP_PATTERNS)
        assert not should_skip_path(".", ["*"])

    def test_no_patterns(self):
        assert not should_skip_path("node_modules", [])


class TestWalkFiles:
    def test_sorted_and_filtered(self, make_repo):
        root = make_repo(
            {
                "b.md": "",
                "a.md": "",
                "notes.txt": "",
                "docs/c.md": "",
                "node_modules/x/d.md": "",
            }
        )
        found = [p.relative_to(root).as_posix() for p in walk_files(root, DEFAULT_SKIP_PATTERNS, ".md")]
        assert found == ["a.md", "b.md", "docs/c.md"]

    def test_without_suffix(self, make_repo):
        root = make_repo({"a.md": "", "b.txt": ""})
        assert len(list(walk_files(root, []))) == 2


class TestSafeReadFile:
    def test_reads_text(self, tmp_path):
        path = tmp_path / "a.md"
        path.write_text("hello", encoding="utf-8")
        assert safe_read_file(path) == "hello"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileAccessError) as exc_info:
            safe_read_file(tmp_path / "missing.md")
        assert exc_info.value.filepath == tmp_path / "missing.md"

    def test_directory(self, tmp_path):
        with pytest.raises(FileAccessError):
            safe_read_file(tmp_path)


def test_to_posix():
    assert to_posix("docs/guide.md") == "docs/guide.md"
    assert to_posix("") == ""
