"""Pytest configuration and fixtures for agent-skills-tool tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from agent_skills_tool.core.git import GitClient
from agent_skills_tool.core.types import GitResult

SKILL_MD = """---
name: {name}
description: {description}
metadata:
  version: {version}
---

# {name}

Instructions here.
"""


def write_skill(
    skill_dir: Path,
    name: str = "my-skill",
    description: str = "A test skill",
    version: str = "1.0.0",
    files: dict[str, str] | None = None,
) -> Path:
    """Create a skill directory with SKILL.md and optional extra files."""
    skill_dir.mkdir(parents=True, exist_ok=True)
    (skill_dir / "SKILL.md").write_text(
        SKILL_MD.format(name=name, description=description, version=version),
        encoding="utf-8",
    )
    for rel_path, content in (files or {}).items():
        file_path = skill_dir / rel_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
    return skill_dir


def snapshot(root: Path) -> dict[str, bytes]:
    """Map every file under root to its content."""
    return {
        str(path.relative_to(root)): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


class FakeGitClient(GitClient):
    """Git client that populates the clone directory instead of cloning.

    populate is called with the clone directory; calls records every clone.
    """

    def __init__(
        self,
        populate: Callable[[Path], None] | None = None,
        result: Callable[[list[str]], GitResult] | None = None,
    ) -> None:
        super().__init__()
        self.populate = populate
        self.result = result
        self.calls: list[dict[str, object]] = []

    def clone(self, url: str, target_dir: Path, ref: str | None = None) -> GitResult:
        self.calls.append({"url": url, "target_dir": target_dir, "ref": ref})
        command = ["git", "clone", url, str(target_dir)]
        if self.result is not None:
            return self.result(command)
        if self.populate is not None:
            self.populate(target_dir)
        return GitResult.success(command)


@pytest.fixture
def skill_factory(tmp_path: Path) -> Callable[..., Path]:
    """Create skills under tmp_path/src."""

    def factory(dir_name: str = "my-skill", **kwargs: object) -> Path:
        return write_skill(tmp_path / "src" / dir_name, **kwargs)  # type: ignore[arg-type]

    return factory


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """An empty fake home directory."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty project directory."""
    project = tmp_path / "project"
    project.mkdir()
    return project
