"""Tests for maturity, quality and recommendation scoring."""

import pytest

from context_frame.models import ContentMetrics, DetectedFile, ScanResult
from context_frame.patterns import FILE_PATTERNS
from context_frame.scanning import RepositoryScanner
from context_frame.scorer import (
    MAX_RECOMMENDATIONS,
    calculate_commit_bonus,
    calculate_quality_score,
    calculate_score,
    generate_recommendations,
    round_half_up,
)

_PATTERNS = {p.name: p for p in FILE_PATTERNS}


def _detected(name, path=None, metrics=None):
    pattern = _PATTERNS[name]
    return DetectedFile(
        path=path or pattern.patterns[0],
        pattern=pattern,
        metrics=metrics if metrics is not None else ContentMetrics(),
    )


def _scan(*detected, tools=None, commit_counts=None, base_path="/repo"):
    detected = list(detected)
    if tools is None:
        tools = list(dict.fromkeys(d.pattern.tool for d in detected))
    return ScanResult(
        base_path=base_path,
        detected_files=detected,
        tools_detected=tools,
        total_files_scanned=len(detected),
        commit_counts=commit_counts or {},
    )


class TestMaturityLevel:
    def test_empty_scan_is_level_one(self):
        score = calculate_score(_scan())
        assert score.maturity_level == 1
        assert score.maturity_name == "Zero AI"
        assert score.total_weight == 0
        assert score.tool_breakdown == {}

    def test_highest_evidenced_level_wins(self):
        score = calculate_score(
            _scan(_detected("Claude Instructions"), _detected("Architecture Documentation"))
        )
        assert score.maturity_level == 3
        assert score.total_weight == 22

    def test_levels_are_not_cumulative(self):
        score = calculate_score(_scan(_detected("Claude Agents")))
        assert score.maturity_level == 5
        assert score.maturity_name == "Multi-Agent Ready"
        assert score.total_weight == 15

    def test_weight_is_monotonic(self):
        base = [_detected("Claude Instructions")]
        before = calculate_score(_scan(*base)).total_weight
        after = calculate_score(_scan(*base, _detected("Cline Rules"))).total_weight
        assert after >= before

    def test_tool_breakdown(self):
        score = calculate_score(
            _scan(
                _detected("Claude Instructions"),
                _detected("Claude Directory", path=".claude"),
                _detected("Cursor Rules (legacy)"),
            )
        )
        assert score.tool_breakdown["Claude Code"].files == ["CLAUDE.md", ".claude"]
        assert score.tool_breakdown["Claude Code"].weight == 20
        assert score.tool_breakdown["Cursor"].weight == 10


class TestQualityScore:
    def test_zero_metrics(self):
        assert calculate_quality_score(ContentMetrics()) == 0.0

    def test_components_cap_at_two(self):
        huge = ContentMetrics(sections=1000, file_paths=1000, commands=1000, constraints=1000, word_count=10_000)
        assert calculate_quality_score(huge) == 10.0

    def test_single_component_caps(self):
        assert calculate_quality_score(ContentMetrics(word_count=10_000)) == 2.0

    def test_partial_components(self):
        # 3/5 + 250/500 = 0.6 + 0.5
        assert calculate_quality_score(ContentMetrics(sections=3, word_count=250)) == 1.1

    def test_rounds_half_up(self):
        assert round_half_up(0.25) == 0.3
        assert round_half_up(0.24) == 0.2

    def test_only_markdown_contributes_full_metrics(self):
        rules = DetectedFile(
            path=".cursorrules",
            pattern=_PATTERNS["Cursor Rules (legacy)"],
            word_count=500,
            metrics=ContentMetrics(sections=10, constraints=20, word_count=500),
        )
        score = calculate_score(_scan(rules))
        assert score.quality_metrics == ContentMetrics(word_count=500)
        assert score.quality_score == 1.0

    def test_metrics_are_summed_across_documents(self):
        score = calculate_score(
            _scan(
                _detected("Claude Instructions", metrics=ContentMetrics(sections=1, word_count=10)),
                _detected(
                    "Architecture Documentation",
                    metrics=ContentMetrics(sections=5, constraints=5, word_count=500),
                ),
            )
        )
        assert score.quality_metrics.sections == 6
        assert score.quality_metrics.word_count == 510
        assert 0.0 <= score.quality_score <= 10.0

    def test_missing_metrics_are_read_from_disk(self, make_repo):
        root = make_repo({"CLAUDE.md": "# One\n## Two\n"})
        detected = DetectedFile(path="CLAUDE.md", pattern=_PATTERNS["Claude Instructions"])
        score = calculate_score(_scan(detected, base_path=str(root)))
        assert score.quality_metrics.sections == 2

    def test_unreadable_document_scores_zero(self):
        detected = DetectedFile(path="CLAUDE.md", pattern=_PATTERNS["Claude Instructions"])
        score = calculate_score(_scan(detected, base_path="/nonexistent/repo"))
        assert score.quality_metrics == ContentMetrics()


class TestCommitBonus:
    def test_no_history(self):
        assert calculate_commit_bonus({}) == 0.0

    def test_counts_files_with_five_commits(self):
        assert calculate_commit_bonus({"a": 5, "b": 12, "c": 4}) == 1.0

    def test_capped(self):
        assert calculate_commit_bonus({str(i): 50 for i in range(10)}) == 2.0

    def test_bonus_does_not_change_quality(self):
        plain = calculate_score(_scan(_detected("Claude Instructions")))
        with_history = calculate_score(
            _scan(_detected("Claude Instructions"), commit_counts={"CLAUDE.md": 9})
        )
        assert with_history.commit_bonus == 0.5
        assert with_history.quality_score == plain.quality_score


class TestRecommendations:
    def test_empty_repository(self):
        recs = calculate_score(_scan()).recommendations
        assert recs == [
            "Add a CLAUDE.md or .cursorrules file to provide basic AI instructions",
            "Create ARCHITECTURE.md to document your system design",
            "Add CONVENTIONS.md to establish coding standards",
            "Set up .claude/commands/ for custom automation",
            "Configure hooks for pre/post processing",
        ]

    def test_never_more_than_five(self):
        for level in range(1, 9):
            recs = generate_recommendations(_scan(), level, ContentMetrics())
            assert len(recs) <= MAX_RECOMMENDATIONS

    def test_level_five_gets_content_and_tool_advice(self):
        recs = calculate_score(_scan(_detected("Claude Agents"))).recommendations
        assert recs == [
            "Add more sections to your documentation for better organization",
            "Include more explicit constraints (must/should/never) for clearer guidance",
            "Expand your documentation with more detailed instructions",
            "Add .github/copilot-instructions.md for Copilot support",
            "Add .cursorrules or .cursor/rules/ for Cursor support",
        ]

    def test_nothing_to_recommend(self):
        rich = ContentMetrics(sections=10, constraints=10, word_count=1000)
        scan = _scan(tools=["Claude Code", "GitHub Copilot", "Cursor"])
        assert generate_recommendations(scan, 5, rich) == []


class TestEndToEnd:
    def test_claude_plus_architecture_repository(self, make_repo):
        constraints = " ".join(["You must test.", "Never skip.", "Always lint.", "Do not push.", "Should review."])
        architecture = "\n".join(
            ["# Architecture"] + [f"## Part {i}\n" + ("word " * 100) for i in range(5)] + [constraints]
        )
        root = make_repo(
            {
                "CLAUDE.md": "# Claude\none two three four five six seven eight",
                "ARCHITECTURE.md": architecture,
            }
        )
        scan = RepositoryScanner(str(root), commit_counter=None).scan()
        score = calculate_score(scan)

        assert score.maturity_level == 3
        assert "Claude Code" in scan.tools_detected
        assert "Generic" in scan.tools_detected
        assert score.total_weight == 22
        assert score.quality_metrics.sections == 7
        assert score.quality_metrics.constraints == 5
        assert score.quality_score == pytest.approx(
            round_half_up(min(7 / 5, 2) + min(5 / 10, 2) + min(score.quality_metrics.word_count / 500, 2))
        )
