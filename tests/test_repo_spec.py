"""Tests for repository spec parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from agent_skills_tool.core.repo_spec import is_repo_like, parse_repo_spec
from agent_skills_tool.core.types import RepoSpec


class TestParseGitHubUrl:
    """Tests for GitHub URLs."""

    def test_tree_url_with_subdir(self) -> None:
        """Test extracting ref and subdir from a tree URL."""
        spec = parse_repo_spec("https://github.com/o/r/tree/main/skills/x")
        assert spec == RepoSpec(
            repo_url="https://github.com/o/r.git", ref="main", subdir="skills/x"
        )

    def test_blob_url_to_skill_file(self) -> None:
        """Test that a link to SKILL.md points at its directory."""
        spec = parse_repo_spec("https://github.com/o/r/blob/v2/skills/x/SKILL.md")
        assert spec is not None
        assert spec.ref == "v2"
        assert spec.subdir == "skills/x"

    def test_blob_url_to_root_skill_file(self) -> None:
        """Test a SKILL.md at the repository root."""
        spec = parse_repo_spec("https://github.com/o/r/blob/main/SKILL.md")
        assert spec == RepoSpec(repo_url="https://github.com/o/r.git", ref="main")

    def test_blob_url_to_prefixed_skill_file(self) -> None:
        """Test any path ending in SKILL.md is treated as the manifest link."""
        spec = parse_repo_spec("https://github.com/o/r/blob/main/skills/x/MY_SKILL.md")
        assert spec is not None
        assert spec.subdir == "skills/x"

    def test_tree_url_without_subdir(self) -> None:
        """Test a tree URL naming only a ref."""
        spec = parse_repo_spec("https://github.com/o/r/tree/dev")
        assert spec == RepoSpec(repo_url="https://github.com/o/r.git", ref="dev")

    def test_trailing_slash_in_subdir(self) -> None:
        """Test trailing slashes are dropped from the subdir."""
        spec = parse_repo_spec("https://github.com/o/r/tree/main/skills/x/")
        assert spec is not None
        assert spec.subdir == "skills/x"

    def test_plain_repo_url(self) -> None:
        """Test a repository URL without ref or path."""
        spec = parse_repo_spec("https://github.com/o/r")
        assert spec == RepoSpec(repo_url="https://github.com/o/r.git")

    def test_repo_url_with_git_suffix(self) -> None:
        """Test that .git is not appended twice."""
        spec = parse_repo_spec("https://github.com/o/r.git")
        assert spec == RepoSpec(repo_url="https://github.com/o/r.git")

    def test_github_url_without_repo(self) -> None:
        """Test a GitHub URL naming only an owner is passed through."""
        spec = parse_repo_spec("https://github.com/o")
        assert spec == RepoSpec(repo_url="https://github.com/o")


class TestParseOtherForms:
    """Tests for non-GitHub repository forms and local paths."""

    def test_other_host_is_opaque(self) -> None:
        """Test that non-GitHub URLs are cloned as given."""
        url = "https://gitlab.com/o/r/-/tree/main/skills/x"
        assert parse_repo_spec(url) == RepoSpec(repo_url=url)

    def test_http_url(self) -> None:
        """Test plain http URLs."""
        url = "http://git.example.com/skills"
        assert parse_repo_spec(url) == RepoSpec(repo_url=url)

    def test_git_suffix(self) -> None:
        """Test SSH-style URLs ending in .git."""
        url = "git@github.com:o/r.git"
        assert parse_repo_spec(url) == RepoSpec(repo_url=url)

    def test_shorthand(self) -> None:
        """Test owner/repo shorthand."""
        assert parse_repo_spec("o/r") == RepoSpec(repo_url="https://github.com/o/r.git")

    def test_shorthand_with_dots_and_hyphens(self) -> None:
        """Test shorthand with dots and hyphens in names."""
        spec = parse_repo_spec("my-org/skills.repo")
        assert spec == RepoSpec(repo_url="https://github.com/my-org/skills.repo.git")

    @pytest.mark.parametrize(
        "text",
        ["/local/path", "a/b/c", "./my-skill", "../my-skill", "my-skill", "", "C:\\skills\\x"],
    )
    def test_local_paths(self, text: str) -> None:
        """Test inputs that are treated as local paths."""
        assert parse_repo_spec(text) is None

    def test_spec_is_immutable(self) -> None:
        """Test that RepoSpec cannot be modified."""
        spec = parse_repo_spec("o/r")
        assert spec is not None
        with pytest.raises(ValidationError):
            spec.ref = "main"  # type: ignore[misc]


class TestIsRepoLike:
    """Tests for the repository pre-check."""

    @pytest.mark.parametrize(
        "text",
        [
            "https://github.com/o/r",
            "http://example.com/x",
            "git@github.com:o/r.git",
            "/srv/repos/skills.git",
            "o/r",
        ],
    )
    def test_repo_like(self, text: str) -> None:
        """Test inputs recognized as repositories."""
        assert is_repo_like(text) is True

    @pytest.mark.parametrize(
        "text", ["", "/abs/path", "rel/dir/skill", "./skill", "skill", "SKILL.md"]
    )
    def test_not_repo_like(self, text: str) -> None:
        """Test inputs recognized as local paths."""
        assert is_repo_like(text) is False
