"""CLI module for agent-skills-tool.

Provides the command-line interface for installing skills.
"""

from agent_skills_tool.cli.installer import SkillInstaller, run_install

__all__ = ["SkillInstaller", "run_install"]
