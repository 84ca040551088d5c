"""SKILL.md manifest parsing and validation."""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from agent_skills_tool.core.errors import ValidationError
from agent_skills_tool.core.repo_spec import SKILL_FILE_NAME

_FRONTMATTER_RE = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(.*?)^---[ \t]*\r?$\n?(.*)\Z",
    re.DOTALL | re.MULTILINE,
)

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
_SEMVER_RE = re.compile(
    r"^(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)"
    r"(?:-((?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9][0-9]*|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?\Z"
)


def is_valid_semver(version: str) -> bool:
    """Check a version string against semantic versioning 2.0.0."""
    return _SEMVER_RE.match(version) is not None


def parse_frontmatter(content: str, skill_file: Path | str = SKILL_FILE_NAME) -> tuple[Any, str] | None:
    """
    Split a SKILL.md file into frontmatter and body.

    Args:
        content: The raw file content
        skill_file: Manifest path used in error messages

    Returns:
        Tuple of (parsed YAML header, markdown body), or None when the file
        has no ``---`` delimited header. The header is returned as loaded;
        it is not guaranteed to be a mapping.

    Raises:
        ValidationError: If the header is not valid YAML
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return None

    frontmatter_str, body = match.groups()
    try:
        frontmatter = yaml.safe_load(frontmatter_str)
    except yaml.YAMLError as e:
        problem = getattr(e, "problem", None) or "could not be parsed"
        raise ValidationError(f"Invalid YAML frontmatter in {skill_file}: {problem}") from e
    return frontmatter, body


def _text(value: Any) -> str:
    # false, 0 and empty values count as blank
    if not value:
        return ""
    return str(value).strip()


def validate_frontmatter(frontmatter: Any, skill_file: Path | str) -> None:
    """
    Check the fields every installable skill must declare.

    Stops at the first problem found, in this order: no frontmatter, name,
    description, metadata.version, semver syntax of metadata.version.

    Raises:
        ValidationError: Describing the first violation
    """
    if not isinstance(frontmatter, Mapping):
        raise ValidationError(f"Missing YAML frontmatter in {skill_file}")

    name = _text(frontmatter.get("name"))
    description = _text(frontmatter.get("description"))
    metadata = frontmatter.get("metadata")
    version = _text(metadata.get("version")) if isinstance(metadata, Mapping) else ""

    if not name:
        raise ValidationError(f'Missing required frontmatter field "name" in {skill_file}')

    if name in (".", "..") or "/" in name or "\\" in name or Path(name).is_absolute():
        raise ValidationError(
            f'Invalid frontmatter field "name" in {skill_file}: '
            f"{name!r} must be a single directory name"
        )

    if not description:
        raise ValidationError(
            f'Missing required frontmatter field "description" in {skill_file}'
        )

    if not version:
        raise ValidationError(
            f'Missing required frontmatter field "metadata.version" in {skill_file}'
        )

    if not is_valid_semver(version):
        raise ValidationError(f'Invalid semver "metadata.version" in {skill_file}: {version}')


def load_manifest(skill_dir: Path) -> dict[str, Any]:
    """
    Read and validate the SKILL.md in a skill directory.

    Returns:
        The validated frontmatter mapping
    """
    skill_file = skill_dir / SKILL_FILE_NAME
    try:
        content = skill_file.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValidationError(f"{skill_file} is not valid UTF-8") from e
    parsed = parse_frontmatter(content, skill_file)

    frontmatter = parsed[0] if parsed else None
    validate_frontmatter(frontmatter, skill_file)
    return dict(frontmatter)
