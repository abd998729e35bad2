"""Detection catalog: the file patterns each AI coding tool leaves behind.

Each pattern specifier is one of:
    - an exact repository-relative path (``CLAUDE.md``)
    - a glob containing ``*`` (``.cursor/rules/*.mdc``)
    - a directory marker ending in ``/`` (``.claude/commands/``)

New tools are supported by appending entries; ``tool`` is a grouping key,
not an enum.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FilePattern:
    """A named detection rule mapping path specifiers to a tool, weight and level."""

    name: str
    tool: str
    patterns: tuple[str, ...]
    weight: int
    level: int

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "tool": self.tool,
            "patterns": list(self.patterns),
            "weight": self.weight,
            "level": self.level,
        }


def is_directory_marker(specifier: str) -> bool:
    return specifier.endswith("/")


def is_glob(specifier: str) -> bool:
    return "*" in specifier


FILE_PATTERNS: tuple[FilePattern, ...] = (
    # ── Claude Code ────────────────────────────────────────────
    FilePattern("Claude Instructions", "Claude Code", ("CLAUDE.md", "claude.md"), 10, 2),
    FilePattern("Claude Agents", "Claude Code", ("AGENTS.md", "agents.md"), 15, 5),
    FilePattern("Claude Directory", "Claude Code", (".claude/",), 10, 4),
    FilePattern(
        "Claude Settings",
        "Claude Code",
        (".claude/settings.json", ".claude/settings.local.json"),
        8,
        4,
    ),
    FilePattern("Claude Commands", "Claude Code", (".claude/commands/",), 12, 4),
    FilePattern("Claude MCP Config", "Claude Code", (".claude/mcp.json",), 15, 5),
    # ── GitHub Copilot ─────────────────────────────────────────
    FilePattern(
        "Copilot Instructions", "GitHub Copilot", (".github/copilot-instructions.md",), 10, 2
    ),
    FilePattern("Copilot Agents", "GitHub Copilot", (".github/agents/",), 15, 5),
    # ── Cursor ─────────────────────────────────────────────────
    FilePattern("Cursor Rules (legacy)", "Cursor", (".cursorrules",), 10, 2),
    FilePattern(
        "Cursor Rules Directory", "Cursor", (".cursor/rules/", ".cursor/rules/*.mdc"), 12, 3
    ),
    # ── Goose ──────────────────────────────────────────────────
    FilePattern("Goose Instructions", "Goose", ("HOWTOAI.md",), 10, 2),
    FilePattern("Goose Hints", "Goose", (".goosehints",), 8, 2),
    FilePattern("Goose Ignore", "Goose", (".gooseignore",), 8, 2),
    # ── Cline / Firebender ─────────────────────────────────────
    FilePattern("Cline Rules", "Cline", (".clinerules",), 10, 2),
    FilePattern("Firebender Config", "Firebender", ("firebender.json",), 10, 2),
    # ── AI Rules (block/ai-rules) ──────────────────────────────
    FilePattern("AI Rules Directory", "AI Rules", ("ai-rules/", "ai-rules/index.md"), 15, 4),
    FilePattern("AI Rules Framework", "AI Rules", ("ai-rules/framework-overview.md",), 10, 3),
    FilePattern("AI Usage Tracking", "AI Rules", ("ai-rules/ai-usage-tracking.md",), 8, 4),
    FilePattern(
        "Generated AI Rules", "AI Rules", (".generated-ai-rules/", "@ai-rules/"), 12, 5
    ),
    # ── AMP / OpenAI Codex ─────────────────────────────────────
    FilePattern("AMP Config", "AMP", (".amp/", "amp.json"), 10, 3),
    FilePattern("Codex Instructions", "OpenAI Codex", ("CODEX.md", "codex.md"), 10, 2),
    FilePattern("Codex Directory", "OpenAI Codex", (".codex/",), 10, 4),
    # ── Tool-agnostic context documents ────────────────────────
    FilePattern(
        "Architecture Documentation",
        "Generic",
        ("ARCHITECTURE.md", "architecture.md", "docs/architecture.md"),
        12,
        3,
    ),
    FilePattern(
        "Conventions Documentation",
        "Generic",
        ("CONVENTIONS.md", "conventions.md", "STYLE.md"),
        10,
        3,
    ),
    FilePattern("API Documentation", "Generic", ("API.md", "api.md", "docs/api.md"), 8, 3),
    FilePattern(
        "Contributing Guidelines", "Generic", ("CONTRIBUTING.md", "contributing.md"), 6, 3
    ),
    FilePattern("MCP Configuration", "Generic", ("mcp.json", ".mcp.json"), 15, 5),
)


def get_patterns_by_tool(tool: str) -> list[FilePattern]:
    return [p for p in FILE_PATTERNS if p.tool == tool]


def get_patterns_by_level(level: int) -> list[FilePattern]:
    return [p for p in FILE_PATTERNS if p.level == level]


def get_known_tools() -> list[str]:
    """Tool names in catalog order, without duplicates."""
    return list(dict.fromkeys(p.tool for p in FILE_PATTERNS))
