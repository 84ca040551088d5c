"""Agent Skills Tool - install Agent Skills into Codex, Claude Code, and Gemini."""

from agent_skills_tool.core.types import (
    ConflictAction,
    InstallReport,
    InstallTarget,
    RepoSpec,
)

__version__ = "0.1.0"

__all__ = [
    "ConflictAction",
    "InstallReport",
    "InstallTarget",
    "RepoSpec",
]
