"""Skill installer module.

Copies a resolved skill into each install target, resolving conflicts with
existing installs by overwriting, merging, or asking the user.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from agent_skills_tool.core.errors import ConfigurationError
from agent_skills_tool.core.git import GitClient
from agent_skills_tool.core.manifest import load_manifest
from agent_skills_tool.core.repo_spec import is_repo_like
from agent_skills_tool.core.source import resolve_skill_source
from agent_skills_tool.core.targets import get_install_targets
from agent_skills_tool.core.types import (
    ConflictAction,
    InstallReport,
    InstallStatus,
    InstallTarget,
)

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True)

# Directory left behind by git clone; never part of an installed skill
GIT_DIR_NAME = ".git"

CONFLICT_CHOICES: tuple[tuple[ConflictAction, str], ...] = (
    (ConflictAction.OVERWRITE, "delete existing and reinstall"),
    (ConflictAction.MERGE, "overwrite files, keep extra files"),
    (ConflictAction.SKIP, "cancel for this target"),
)

PromptFn = Callable[[str, Path], ConflictAction]
ReportFn = Callable[[InstallReport], None]
IgnoreFn = Callable[[str, list[str]], Any]


def prompt_conflict_action(label: str, target_skill_dir: Path) -> ConflictAction:
    """Ask the user what to do with an existing skill directory. Blocks until answered."""
    console.print(
        f"[yellow]Conflict detected for {escape(label)}:[/yellow] {escape(str(target_skill_dir))}"
    )
    for action, description in CONFLICT_CHOICES:
        console.print(f"  [bold]{action.value}[/bold]  {description}")
    answer = Prompt.ask(
        "Choose an action",
        choices=[action.value for action, _ in CONFLICT_CHOICES],
        console=console,
    )
    return ConflictAction(answer)


def check_install_flags(force: bool, merge: bool) -> None:
    """Reject option combinations that cannot be honoured."""
    if force and merge:
        raise ConfigurationError("--force and --merge cannot be used together")


def _remove_path(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()


def _copy_dir(source_dir: Path, target_dir: Path, ignore: IgnoreFn | None) -> None:
    shutil.copytree(source_dir, target_dir, ignore=ignore, dirs_exist_ok=True)


class SkillInstaller:
    """Installs one skill directory into a list of targets."""

    def __init__(
        self,
        prompt: PromptFn | None = None,
        on_report: ReportFn | None = None,
    ) -> None:
        """
        Initialize the installer.

        Args:
            prompt: Called with (label, path) when a target already has the
                skill and neither force nor merge was requested.
                Defaults to an interactive terminal prompt.
            on_report: Called after each target is processed
        """
        self.prompt = prompt or prompt_conflict_action
        self.on_report = on_report

    def _resolve_action(
        self,
        target: InstallTarget,
        target_skill_dir: Path,
        force: bool,
        merge: bool,
    ) -> ConflictAction:
        if not target_skill_dir.exists() and not target_skill_dir.is_symlink():
            return ConflictAction.OVERWRITE
        if force:
            return ConflictAction.OVERWRITE
        if merge:
            return ConflictAction.MERGE
        return ConflictAction(self.prompt(target.label, target_skill_dir))

    def install_target(
        self,
        skill_dir: Path,
        skill_name: str,
        target: InstallTarget,
        force: bool = False,
        merge: bool = False,
        ignore: IgnoreFn | None = None,
    ) -> InstallReport:
        """Install into a single target. Filesystem errors propagate."""
        target_skill_dir = target.skill_dir(skill_name)
        target.base_dir.mkdir(parents=True, exist_ok=True)

        action = self._resolve_action(target, target_skill_dir, force, merge)
        logger.debug("%s: %s %s", target.label, action.value, target_skill_dir)

        if action == ConflictAction.SKIP:
            status = InstallStatus.SKIPPED
        elif action == ConflictAction.MERGE:
            _copy_dir(skill_dir, target_skill_dir, ignore)
            status = InstallStatus.MERGED
        else:
            if target_skill_dir.exists() or target_skill_dir.is_symlink():
                _remove_path(target_skill_dir)
            _copy_dir(skill_dir, target_skill_dir, ignore)
            status = InstallStatus.INSTALLED

        return InstallReport(label=target.label, path=target_skill_dir, status=status)

    def install(
        self,
        skill_dir: Path,
        skill_name: str,
        targets: list[InstallTarget],
        force: bool = False,
        merge: bool = False,
        ignore: IgnoreFn | None = None,
    ) -> list[InstallReport]:
        """
        Install a skill into every target, in order.

        The first failing target aborts the run: targets already processed
        keep their new contents and later targets are left untouched.

        Args:
            skill_dir: Directory containing SKILL.md and the skill files
            skill_name: Validated manifest name, used as the directory name
            targets: Install targets, processed in order
            force: Overwrite existing installs without asking
            merge: Merge into existing installs without asking
            ignore: shutil.copytree ignore callable

        Returns:
            One InstallReport per target

        Raises:
            ConfigurationError: If force and merge are both set
        """
        check_install_flags(force, merge)

        reports: list[InstallReport] = []
        for target in targets:
            report = self.install_target(skill_dir, skill_name, target, force, merge, ignore)
            reports.append(report)
            if self.on_report is not None:
                self.on_report(report)
        return reports


def run_install(
    skill_path: str,
    subdir: str | None = None,
    ref: str | None = None,
    project_path: str | None = None,
    force: bool = False,
    merge: bool = False,
    git: GitClient | None = None,
    prompt: PromptFn | None = None,
    on_report: ReportFn | None = None,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> list[InstallReport]:
    """
    Resolve, validate and install a skill.

    Args:
        skill_path: Local directory, SKILL.md file, repository URL or owner/repo
        subdir: Skill directory within the source
        ref: Git branch or tag for repository sources
        project_path: Project root; installs into the project instead of the user scope
        force: Overwrite existing installs
        merge: Merge into existing installs
        git: Git client for repository sources
        prompt: Conflict prompt passed to SkillInstaller
        on_report: Per-target callback passed to SkillInstaller
        env: Environment for target resolution
        home: Home directory for target resolution

    Returns:
        One InstallReport per target
    """
    check_install_flags(force, merge)

    source = skill_path if is_repo_like(skill_path) else str(Path(skill_path).resolve())

    with resolve_skill_source(source, subdir=subdir, ref=ref, git=git) as skill_source:
        frontmatter = load_manifest(skill_source.skill_dir)

        skill_name = str(frontmatter["name"]).strip()
        skill_dir_name = skill_source.skill_dir.name
        if skill_dir_name != skill_name:
            logger.warning(
                'Skill directory name "%s" does not match SKILL.md name "%s". '
                "Using SKILL.md name for install.",
                skill_dir_name,
                skill_name,
            )

        targets = get_install_targets(project_path, env=env, home=home)
        ignore = shutil.ignore_patterns(GIT_DIR_NAME) if skill_source.cloned else None

        installer = SkillInstaller(prompt=prompt, on_report=on_report)
        return installer.install(
            skill_source.skill_dir,
            skill_name,
            targets,
            force=force,
            merge=merge,
            ignore=ignore,
        )
