"""Core type definitions for agent skill installation."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ConflictAction(str, Enum):
    """How to handle a target where the skill directory already exists."""

    OVERWRITE = "overwrite"
    MERGE = "merge"
    SKIP = "skip"


class InstallStatus(str, Enum):
    """Outcome of installing into a single target."""

    INSTALLED = "installed"
    MERGED = "merged"
    SKIPPED = "skipped"


class RepoSpec(BaseModel):
    """A parsed reference to a remote skill repository.

    repo_url is always something ``git clone`` accepts. ref and subdir are
    only set when the input encoded them (GitHub ``tree``/``blob`` URLs).
    """

    model_config = ConfigDict(frozen=True)

    repo_url: str
    ref: str | None = None
    subdir: str | None = None


class InstallTarget(BaseModel):
    """One destination base directory for one assistant within one scope."""

    model_config = ConfigDict(frozen=True)

    label: str
    base_dir: Path

    def skill_dir(self, skill_name: str) -> Path:
        """Directory the named skill is installed to."""
        return self.base_dir / skill_name

    def __str__(self) -> str:
        return f"{self.label}: {self.base_dir}"


class InstallReport(BaseModel):
    """Result of processing one install target."""

    label: str
    path: Path
    status: InstallStatus

    def __str__(self) -> str:
        """Format the report the way the CLI prints it."""
        if self.status == InstallStatus.SKIPPED:
            return f"Skipped {self.label}: {self.path}"
        if self.status == InstallStatus.MERGED:
            return f"Merged ({self.label}) -> {self.path}"
        return f"Installed ({self.label}) -> {self.path}"


class GitFailure(str, Enum):
    """Ways a git invocation can fail."""

    NOT_FOUND = "not_found"
    EXIT_STATUS = "exit_status"


class GitResult(BaseModel):
    """Result of running the external git client."""

    command: list[str]
    exit_code: int | None = 0
    failure: GitFailure | None = None

    @property
    def ok(self) -> bool:
        """True when git ran and exited with status 0."""
        return self.failure is None

    @classmethod
    def success(cls, command: list[str]) -> GitResult:
        """Create a success result."""
        return cls(command=command, exit_code=0)

    @classmethod
    def not_found(cls, command: list[str]) -> GitResult:
        """Create a result for a missing git binary."""
        return cls(command=command, exit_code=None, failure=GitFailure.NOT_FOUND)

    @classmethod
    def exited(cls, command: list[str], exit_code: int) -> GitResult:
        """Create a result for a non-zero exit status."""
        return cls(command=command, exit_code=exit_code, failure=GitFailure.EXIT_STATUS)
