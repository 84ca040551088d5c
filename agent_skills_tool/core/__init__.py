"""Core modules for agent skill installation.

Primary modules:
- repo_spec: Classify skill sources (local path vs repository)
- source: Resolve a source into a directory containing SKILL.md
- manifest: Parse and validate SKILL.md frontmatter
- targets: Install directories for Codex, Claude and Gemini
- types: Type definitions (RepoSpec, InstallTarget, etc.)
"""

from agent_skills_tool.core.errors import (
    ConfigurationError,
    ExternalToolError,
    ResolutionError,
    SkillToolError,
    ValidationError,
)
from agent_skills_tool.core.git import GitClient
from agent_skills_tool.core.manifest import load_manifest, validate_frontmatter
from agent_skills_tool.core.repo_spec import is_repo_like, parse_repo_spec
from agent_skills_tool.core.source import SkillSource, resolve_skill_source
from agent_skills_tool.core.targets import get_install_targets
from agent_skills_tool.core.types import (
    ConflictAction,
    GitFailure,
    GitResult,
    InstallReport,
    InstallStatus,
    InstallTarget,
    RepoSpec,
)

__all__ = [
    # Types
    "ConflictAction",
    "GitFailure",
    "GitResult",
    "InstallReport",
    "InstallStatus",
    "InstallTarget",
    "RepoSpec",
    # Errors
    "ConfigurationError",
    "ExternalToolError",
    "ResolutionError",
    "SkillToolError",
    "ValidationError",
    # Primary modules
    "GitClient",
    "SkillSource",
    "get_install_targets",
    "is_repo_like",
    "load_manifest",
    "parse_repo_spec",
    "resolve_skill_source",
    "validate_frontmatter",
]
