"""Thin wrapper around the external git client."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from agent_skills_tool.core.types import GitResult

logger = logging.getLogger(__name__)


class GitClient:
    """Runs git as a subprocess.

    Output is not captured so clone progress stays visible to the user.
    Failures are reported through GitResult instead of exceptions, keeping
    "git is not installed" apart from "git exited non-zero".
    """

    def __init__(self, executable: str = "git") -> None:
        self.executable = executable

    def run(self, args: list[str], cwd: Path | str | None = None) -> GitResult:
        """
        Run a git command and wait for it to finish.

        Args:
            args: Git command arguments (without 'git' prefix)
            cwd: Working directory

        Returns:
            GitResult describing how the command ended
        """
        cmd = [self.executable] + args
        logger.debug("Running %s", " ".join(cmd))
        try:
            completed = subprocess.run(cmd, cwd=cwd, check=False)
        except FileNotFoundError:
            return GitResult.not_found(cmd)

        if completed.returncode != 0:
            return GitResult.exited(cmd, completed.returncode)
        return GitResult.success(cmd)

    def clone(self, url: str, target_dir: Path, ref: str | None = None) -> GitResult:
        """Shallow clone url into target_dir, limited to ref when given."""
        args = ["clone", "--depth", "1"]
        if ref:
            args.extend(["--branch", ref, "--single-branch"])
        args.extend([url, str(target_dir)])
        return self.run(args)
