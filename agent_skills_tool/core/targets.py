"""Install target directories for each supported assistant."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from agent_skills_tool.core.types import InstallTarget

CODEX_HOME_ENV = "CODEX_HOME"

# (assistant, config directory under home or project root), in install order
ASSISTANTS: tuple[tuple[str, str], ...] = (
    ("codex", ".codex"),
    ("claude", ".claude"),
    ("gemini", ".gemini"),
)

SKILLS_SUBDIR = "skills"


def get_install_targets(
    project_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> list[InstallTarget]:
    """
    Compute where a skill gets installed.

    With a project path, targets are the project-scoped skills directories;
    otherwise the per-user ones. Codex honours $CODEX_HOME for the user scope.

    Args:
        project_path: Project root for a project-scoped install
        env: Environment to read CODEX_HOME from (defaults to os.environ)
        home: User home directory (defaults to Path.home())

    Returns:
        Three targets, always ordered codex, claude, gemini
    """
    if project_path:
        project_root = Path(project_path).resolve()
        return [
            InstallTarget(
                label=f"{assistant}-project",
                base_dir=project_root / config_dir / SKILLS_SUBDIR,
            )
            for assistant, config_dir in ASSISTANTS
        ]

    env = os.environ if env is None else env
    home = Path.home() if home is None else home

    targets: list[InstallTarget] = []
    for assistant, config_dir in ASSISTANTS:
        config_root = home / config_dir
        if assistant == "codex" and env.get(CODEX_HOME_ENV):
            config_root = Path(env[CODEX_HOME_ENV]).resolve()
        targets.append(
            InstallTarget(label=f"{assistant}-user", base_dir=config_root / SKILLS_SUBDIR)
        )
    return targets
