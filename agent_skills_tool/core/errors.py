"""Exceptions raised while resolving, validating and installing skills.

Every error the tool reports to the user derives from SkillToolError.
Filesystem errors during copying are left as plain OSError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from agent_skills_tool.core.types import GitResult


class SkillToolError(Exception):
    """Base class for all agent-skills-tool errors."""


class ConfigurationError(SkillToolError):
    """Conflicting options, e.g. --force with --merge."""


class ResolutionError(SkillToolError):
    """The skill source could not be turned into a directory with SKILL.md."""


class ValidationError(SkillToolError):
    """SKILL.md frontmatter is missing or invalid."""


class ExternalToolError(SkillToolError):
    """The git client is missing or exited with a non-zero status."""

    def __init__(self, message: str, result: GitResult | None = None) -> None:
        super().__init__(message)
        self.result = result
