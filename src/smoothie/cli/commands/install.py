"""
smoothie install / skill / list - Skill installation commands.

Usage:
    smoothie install
    smoothie install --editor cursor --skill forms --skill tables
    smoothie skill
    smoothie list
"""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from smoothie.cli.output import console, print_error
from smoothie.cli.prompts import QuestionaryPrompter, ScriptedPrompter
from smoothie.config import ConfigurationError, SmoothieConfig, load_config
from smoothie.installer import Prompter, SkillInstaller
from smoothie.skills import SkillComposer, normalize_description
from smoothie.storage.paths import get_project_root, get_user_skills_dir

EditorOption = Annotated[
    str | None,
    typer.Option(
        "--editor",
        "-e",
        help="Code editor to install for (e.g. vscode, cursor, claude_code).",
    ),
]

SkillOption = Annotated[
    list[str] | None,
    typer.Option(
        "--skill",
        "-s",
        help="Skill to install (repeatable). Prompts when omitted.",
    ),
]

ProjectOption = Annotated[
    Path | None,
    typer.Option(
        "--project",
        "-p",
        help="Project root (default: current directory).",
    ),
]


def _load_config(project_root: Path) -> SmoothieConfig:
    try:
        config = load_config(project_root)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    # --verbose wins over the configured level
    root_logger = logging.getLogger()
    if root_logger.level != logging.DEBUG:
        root_logger.setLevel(config.log_level)
    return config


def _composer(project_root: Path, config: SmoothieConfig) -> SkillComposer:
    return SkillComposer(user_path=get_user_skills_dir(project_root, config.user_skills_path))


def _prompter() -> Prompter:
    if sys.stdin.isatty():
        return QuestionaryPrompter()
    return ScriptedPrompter()


def _run_installer(
    editor: str | None,
    skills: list[str] | None,
    project: Path | None,
    mark_installed: bool,
) -> None:
    project_root = get_project_root(project)
    config = _load_config(project_root)

    installer = SkillInstaller(
        _prompter(),
        project_root,
        composer=_composer(project_root, config),
        mark_installed=mark_installed,
    )
    installer.run(editor=editor or config.editor, skill_names=skills or None)


def install(
    editor: EditorOption = None,
    skills: SkillOption = None,
    project: ProjectOption = None,
) -> None:
    """Install Smoothie skills to the application."""
    _run_installer(editor, skills, project, mark_installed=False)


def skill(
    editor: EditorOption = None,
    skills: SkillOption = None,
    project: ProjectOption = None,
) -> None:
    """Install Smoothie skills, flagging the ones already installed."""
    _run_installer(editor, skills, project, mark_installed=True)


def list_skills(
    project: ProjectOption = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show source paths.",
        ),
    ] = False,
) -> None:
    """List available skills."""
    project_root = get_project_root(project)
    config = _load_config(project_root)
    skills = _composer(project_root, config).skills()

    if not skills:
        console.print("[yellow]No skills available.[/yellow]")
        return

    table = Table(title="Available Skills")
    table.add_column("Name", style="cyan")
    table.add_column("Origin", style="dim")
    table.add_column("Description")

    if verbose:
        table.add_column("Path", style="dim")

    for item in skills.values():
        description = normalize_description(item.description)
        row = [
            item.display_name,
            "custom" if item.custom else item.package,
            description[:60] + "..." if len(description) > 60 else description,
        ]
        if verbose:
            row.append(str(item.path))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n[dim]Total: {len(skills)} skill(s)[/dim]")
