"""CLI entry point for agent-skills-tool.

Installs a skill into the Codex, Claude Code and Gemini skills directories,
either for the current user or for a single project.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from agent_skills_tool import __version__
from agent_skills_tool.cli.installer import check_install_flags, console, run_install
from agent_skills_tool.core.errors import SkillToolError
from agent_skills_tool.core.types import InstallReport, InstallStatus

err_console = Console(stderr=True, soft_wrap=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="agent-skills-tool",
        description="Install Agent Skills into Codex, Claude Code, and Gemini scopes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Install a local skill for the current user
  agent-skills-tool -i ./skills/my-skill

  # Install into a project (.codex/skills, .claude/skills, .gemini/skills)
  agent-skills-tool -i ./skills/my-skill ~/work/my-project

  # Install from GitHub shorthand, pinned to a tag
  agent-skills-tool -i user/skills-repo --subdir skills/my-skill --ref v1.0.0

  # Install from a GitHub URL that already points at the skill
  agent-skills-tool -i https://github.com/user/skills-repo/tree/main/skills/my-skill

  # Replace existing installs without asking
  agent-skills-tool -i ./skills/my-skill --force

Environment Variables:
  CODEX_HOME: Codex configuration directory (default: ~/.codex)
        """,
    )

    parser.add_argument(
        "-i", "--install",
        dest="skill_path",
        metavar="SKILL_PATH",
        type=str,
        default=None,
        help="Path to a skill directory or SKILL.md, a repository URL, or owner/repo",
    )
    parser.add_argument(
        "--subdir",
        type=str,
        default=None,
        help="Skill directory within a repository",
    )
    parser.add_argument(
        "--ref",
        type=str,
        default=None,
        help="Git branch or tag when installing from a repository",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite existing skill directories",
    )
    parser.add_argument(
        "--merge",
        action="store_true",
        help="Merge into existing skill directories, overwriting files",
    )
    parser.add_argument(
        "destination_project_path",
        nargs="?",
        default=None,
        metavar="DESTINATION_PROJECT_PATH",
        help="Project root path for project-scoped install",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress all logging output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr through rich."""
    if quiet:
        logging.disable(logging.CRITICAL)
        return

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(console=err_console, show_time=False, show_path=False),
        ],
        force=True,
    )


def print_report(report: InstallReport) -> None:
    """Print the outcome of one install target."""
    style = "dim" if report.status == InstallStatus.SKIPPED else "green"
    console.print(f"[{style}]{escape(str(report))}[/{style}]")


def cmd_install(args: argparse.Namespace) -> int:
    """Handle the install command."""
    try:
        check_install_flags(args.force, args.merge)
        run_install(
            skill_path=args.skill_path,
            subdir=args.subdir,
            ref=args.ref,
            project_path=args.destination_project_path,
            force=args.force,
            merge=args.merge,
            on_report=print_report,
        )
    except (SkillToolError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    except KeyboardInterrupt:
        err_console.print("[red]Error:[/red] Installation cancelled")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # No skill to install: show usage and fail, like a missing required option
    if not args.skill_path:
        parser.print_help(sys.stderr)
        return 1

    configure_logging(verbose=args.verbose, quiet=args.quiet)
    return cmd_install(args)


if __name__ == "__main__":
    sys.exit(main())
