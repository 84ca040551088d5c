"""Resolve a skill source into a local directory containing SKILL.md.

Local directories and SKILL.md files are used in place. Repositories are
shallow-cloned into a temporary directory that the returned SkillSource
removes when it is closed.
"""

from __future__ import annotations

import logging
import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path, PurePosixPath, PureWindowsPath
from types import TracebackType

from agent_skills_tool.core.errors import (
    ConfigurationError,
    ExternalToolError,
    ResolutionError,
)
from agent_skills_tool.core.git import GitClient
from agent_skills_tool.core.repo_spec import SKILL_FILE_NAME, parse_repo_spec
from agent_skills_tool.core.types import GitFailure, GitResult

logger = logging.getLogger(__name__)

CLONE_DIR_PREFIX = "agent-skill-"


class SkillSource:
    """A skill directory plus an optional cleanup action.

    Use it as a context manager so temporary clones are removed exactly
    once, however the install ends.
    """

    def __init__(
        self,
        skill_dir: Path,
        cleanup: Callable[[], None] | None = None,
        cloned: bool = False,
    ) -> None:
        self.skill_dir = skill_dir
        self.cloned = cloned
        self._cleanup = cleanup

    @property
    def skill_file(self) -> Path:
        return self.skill_dir / SKILL_FILE_NAME

    def close(self) -> None:
        """Release temporary storage. Safe to call more than once."""
        cleanup, self._cleanup = self._cleanup, None
        if cleanup is not None:
            cleanup()

    def __enter__(self) -> SkillSource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _remove_tree(path: Path) -> None:
    logger.debug("Removing temporary clone %s", path)
    shutil.rmtree(path, ignore_errors=True)


def _check_subdir(subdir: str | None) -> None:
    if not subdir:
        return
    if PurePosixPath(subdir).is_absolute() or PureWindowsPath(subdir).is_absolute():
        raise ConfigurationError(f"Subdir must be a relative path: {subdir}")
    if ".." in PurePosixPath(subdir.replace("\\", "/")).parts:
        raise ConfigurationError(f"Subdir must stay inside the skill source: {subdir}")


def _find_skill_dir(base_dir: Path, subdir: str | None) -> Path:
    skill_dir = base_dir / subdir if subdir else base_dir
    if not (skill_dir / SKILL_FILE_NAME).is_file():
        extra = f" (subdir: {subdir})" if subdir else ""
        raise ResolutionError(f"{SKILL_FILE_NAME} not found in {skill_dir}{extra}")
    return skill_dir


def _raise_for_git(result: GitResult) -> None:
    if result.failure == GitFailure.NOT_FOUND:
        raise ExternalToolError("git is required to install from a repository", result)
    if result.failure == GitFailure.EXIT_STATUS:
        raise ExternalToolError(f"git exited with code {result.exit_code}", result)


def resolve_skill_source(
    source: str,
    subdir: str | None = None,
    ref: str | None = None,
    git: GitClient | None = None,
) -> SkillSource:
    """
    Turn a path, URL or owner/repo shorthand into a skill directory.

    Args:
        source: Local path (already absolute for non-repo input) or repository reference
        subdir: Skill directory relative to the source root
        ref: Git branch or tag; overrides a ref embedded in the URL
        git: Git client used for cloning

    Returns:
        SkillSource whose skill_dir contains SKILL.md

    Raises:
        ConfigurationError: subdir given both as option and in the URL, or
            subdir is absolute or climbs out of the source with ".."
        ExternalToolError: git missing or clone failed
        ResolutionError: path missing, wrong file name, or no SKILL.md
    """
    repo_spec = parse_repo_spec(source)
    if repo_spec is not None:
        if subdir and repo_spec.subdir:
            raise ConfigurationError(
                "Provide either --subdir or a repo URL with a path, not both"
            )
        repo_subdir = repo_spec.subdir or subdir or None
        _check_subdir(repo_subdir)
        clone_ref = ref or repo_spec.ref

        clone_dir = Path(tempfile.mkdtemp(prefix=CLONE_DIR_PREFIX))
        try:
            logger.debug(
                "Cloning %s (ref: %s) into %s", repo_spec.repo_url, clone_ref, clone_dir
            )
            _raise_for_git((git or GitClient()).clone(repo_spec.repo_url, clone_dir, clone_ref))
            skill_dir = _find_skill_dir(clone_dir, repo_subdir)
        except BaseException:
            _remove_tree(clone_dir)
            raise

        return SkillSource(
            skill_dir,
            cleanup=lambda: _remove_tree(clone_dir),
            cloned=True,
        )

    path = Path(source)
    if not path.exists():
        raise ResolutionError(f"Skill path not found: {source}")

    if path.is_file():
        if path.name != SKILL_FILE_NAME:
            raise ResolutionError(f"Skill file must be named {SKILL_FILE_NAME}")
        return SkillSource(path.parent)

    if not path.is_dir():
        raise ResolutionError(f"Skill path must be a directory or {SKILL_FILE_NAME} file")

    _check_subdir(subdir)
    return SkillSource(_find_skill_dir(path, subdir))
