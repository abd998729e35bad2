"""The eight-step AI context maturity ladder."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MaturityLevel:
    """One rung of the maturity ladder.

    ``requirements`` is descriptive only; detection is driven by the
    ``level`` field on each FilePattern.
    """

    level: int
    name: str
    description: str
    requirements: tuple[str, ...] = ()


MATURITY_LEVELS: tuple[MaturityLevel, ...] = (
    MaturityLevel(1, "Zero AI", "No AI context files detected - baseline state"),
    MaturityLevel(
        2,
        "Basic Instructions",
        "Basic AI instruction files present",
        ("CLAUDE.md", ".cursorrules", ".github/copilot-instructions.md", "CODEX.md"),
    ),
    MaturityLevel(
        3,
        "Comprehensive Context",
        "Rich context with architecture and conventions",
        ("ARCHITECTURE.md", "CONVENTIONS.md", "API.md", "CONTRIBUTING.md"),
    ),
    MaturityLevel(
        4,
        "Skills & Automation",
        "Hooks, commands, and memory files configured",
        (".claude/settings.json", ".claude/commands/", "hooks", "memory files"),
    ),
    MaturityLevel(
        5,
        "Multi-Agent Ready",
        "Multiple agents and MCP configurations",
        ("AGENTS.md", ".github/agents/", "mcp.json", ".claude/mcp.json"),
    ),
    MaturityLevel(
        6,
        "Fleet Coordination",
        "Coordinated multi-agent workflows",
        ("agent orchestration", "shared context protocols"),
    ),
    MaturityLevel(
        7,
        "Enterprise Fleet",
        "Enterprise-scale agent management",
        ("centralized governance", "audit trails"),
    ),
    MaturityLevel(
        8,
        "Autonomous Fleet",
        "Self-organizing agent ecosystems",
        ("autonomous optimization", "emergent behaviors"),
    ),
)

MIN_LEVEL = MATURITY_LEVELS[0].level
MAX_LEVEL = MATURITY_LEVELS[-1].level


def get_level_by_number(level: int) -> Optional[MaturityLevel]:
    for entry in MATURITY_LEVELS:
        if entry.level == level:
            return entry
    return None
