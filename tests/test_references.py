"""Tests for markdown cross-reference validation."""

from pathlib import Path

from context_frame.config import DEFAULT_SKIP_PATTERNS
from context_frame.scanning.references import (
    extract_references,
    is_skippable,
    looks_like_path,
    resolve_reference,
    strip_fenced_blocks,
    validate_references,
)


class TestExtractReferences:
    def test_link_targets(self):
        assert extract_references("See [guide](docs/guide.md) and [api](./API.md).") == [
            "docs/guide.md",
            "./API.md",
        ]

    def test_external_and_anchor_links_are_skipped(self):
        text = (
            "[site](https://example.com) [plain](http://example.com) "
            "[mail](mailto:a@b.c) [call](tel:123) [top](#intro)"
        )
        assert extract_references(text) == []

    def test_fragment_is_stripped(self):
        assert extract_references("[setup](INSTALL.md#linux)") == ["INSTALL.md"]

    def test_duplicates_are_collapsed_in_order(self):
        text = "[a](b.md) [c](d.md) [again](b.md) [frag](b.md#x)"
        assert extract_references(text) == ["b.md", "d.md"]

    def test_path_like_inline_code(self):
        text = "Edit `src/main.py`, run `make test`, read `./NOTES.md`."
        assert extract_references(text) == ["src/main.py", "./NOTES.md"]

    def test_inline_code_inside_fence_is_ignored(self):
        text = "```\n`./foo.md`\n```\n"
        assert extract_references(text) == []

    def test_links_inside_fence_still_count(self):
        text = "```md\n[doc](./inside.md)\n```\n"
        assert extract_references(text) == ["./inside.md"]

    def test_tilde_fence(self):
        text = "~~~\n`docs/a.md`\n~~~\nthen `docs/b.md`\n"
        assert extract_references(text) == ["docs/b.md"]

    def test_empty_link_target_is_kept(self):
        assert extract_references("[broken]()") == [""]

    def test_link_title_is_dropped(self):
        text = "[a](./x.md \"Title\") [b](y.md 'Other') [c](z.md (paren title))"
        assert extract_references(text) == ["./x.md", "y.md", "z.md"]

    def test_angle_bracket_destination(self):
        assert extract_references("[a](<docs/my notes.md>)") == ["docs/my notes.md"]

    def test_parentheses_inside_target(self):
        assert extract_references("[a](docs/f(1).md)") == ["docs/f(1).md"]


class TestStripFencedBlocks:
    def test_preserves_line_count(self):
        text = "a\n```\ncode\n```\nb"
        assert strip_fenced_blocks(text).split("\n") == ["a", "", "", "", "b"]

    def test_unclosed_fence_runs_to_end(self):
        assert strip_fenced_blocks("a\n```\n`x/y`\nmore").split("\n") == ["a", "", "", ""]

    def test_shorter_fence_does_not_close(self):
        text = "````\n```\n`a/b`\n````\nafter"
        assert strip_fenced_blocks(text).split("\n")[-1] == "after"
        assert "a/b" not in strip_fenced_blocks(text)


class TestHelpers:
    def test_is_skippable(self):
        assert is_skippable("https://x")
        assert is_skippable("#top")
        assert not is_skippable("docs/x.md")

    def test_looks_like_path(self):
        assert looks_like_path("./run.sh")
        assert looks_like_path("../up.md")
        assert looks_like_path("src/app.py")
        assert looks_like_path("docs\\win.md")
        assert not looks_like_path("npm test")


class TestResolveReference:
    def test_relative_to_document_directory(self, tmp_path):
        resolved = resolve_reference("../README.md", tmp_path / "docs" / "guide.md", tmp_path)
        assert resolved == tmp_path / "README.md"

    def test_leading_slash_is_repository_relative(self, tmp_path):
        resolved = resolve_reference("/src/app.py", tmp_path / "docs" / "guide.md", tmp_path)
        assert resolved == tmp_path / "src" / "app.py"

    def test_leading_backslash_is_repository_relative(self, tmp_path):
        resolved = resolve_reference("\\src\\app.py", tmp_path / "docs" / "guide.md", tmp_path)
        assert resolved == tmp_path / "src" / "app.py"

    def test_empty_reference(self, tmp_path):
        assert resolve_reference("", tmp_path / "a.md", tmp_path) is None


class TestValidateReferences:
    def test_missing_target_is_broken(self, make_repo):
        root = make_repo({"README.md": "See [text](./missing.md)."})
        result = validate_references(root, DEFAULT_SKIP_PATTERNS)

        assert result.total_references == 1
        assert result.resolved_references == 0
        assert len(result.broken_references) == 1
        issue = result.broken_references[0]
        assert issue.source_file == "README.md"
        assert issue.reference == "./missing.md"
        assert issue.resolved_path == "missing.md"

    def test_resolved_and_broken_mix(self, make_repo):
        root = make_repo(
            {
                "README.md": "[arch](ARCHITECTURE.md) [gone](docs/gone.md)",
                "ARCHITECTURE.md": "# Arch\nCode lives in `/src/app.py`.",
                "src/app.py": "",
                "docs/guide.md": "[home](../README.md) [sib](sibling.md)",
            },
        )
        result = validate_references(root, DEFAULT_SKIP_PATTERNS)

        assert result.total_references == 5
        assert result.resolved_references == 3
        broken = {(i.source_file, i.resolved_path) for i in result.broken_references}
        assert broken == {("README.md", "docs/gone.md"), ("docs/guide.md", "docs/sibling.md")}

    def test_titled_link_resolves(self, make_repo):
        root = make_repo({"README.md": "[x](./x.md \"Title\")", "x.md": ""})
        result = validate_references(root, DEFAULT_SKIP_PATTERNS)
        assert result.resolved_references == 1
        assert result.broken_references == []

    def test_directory_targets_resolve(self, make_repo):
        root = make_repo({"README.md": "[docs](docs/)", "docs/": None})
        result = validate_references(root, DEFAULT_SKIP_PATTERNS)
        assert result.resolved_references == 1

    def test_empty_reference_has_empty_resolved_path(self, make_repo):
        root = make_repo({"README.md": "[nothing]()"})
        result = validate_references(root, DEFAULT_SKIP_PATTERNS)
        assert result.total_references == 1
        assert result.broken_references[0].resolved_path == ""

    def test_skipped_directories_are_not_validated(self, make_repo):
        root = make_repo(
            {
                "node_modules/pkg/README.md": "[x](nope.md)",
                "dist/NOTES.md": "[y](nope.md)",
                "docs/ok.md": "no references here",
            },
        )
        result = validate_references(root, DEFAULT_SKIP_PATTERNS)
        assert result.total_references == 0
        assert result.resolution_rate == 1.0

    def test_fenced_only_document_yields_nothing(self, make_repo):
        root = make_repo({"NOTES.md": "```\n`./foo.md`\n```\n"})
        assert validate_references(root, DEFAULT_SKIP_PATTERNS).total_references == 0

    def test_resolution_rate(self, make_repo):
        root = make_repo({"a.md": "[b](b.md) [c](c.md)", "b.md": ""})
        result = validate_references(root, DEFAULT_SKIP_PATTERNS)
        # b.md has no references; a.md has one good, one broken
        assert result.resolution_rate == 0.5


def test_posix_source_paths(make_repo):
    root = make_repo({"docs/deep/x.md": "[y](y.md)"})
    result = validate_references(Path(root), DEFAULT_SKIP_PATTERNS)
    assert result.broken_references[0].source_file == "docs/deep/x.md"
    assert result.broken_references[0].resolved_path == "docs/deep/y.md"
