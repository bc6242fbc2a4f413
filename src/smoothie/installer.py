"""
Skill installation flow.

Ties together environment selection, skill discovery, skill selection,
writing, and result reporting. User interaction goes through a Prompter so
the flow can run against a terminal or a scripted test double.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from smoothie.environments import Environment, all_environments, get_environment
from smoothie.skills.composer import SkillComposer
from smoothie.skills.models import InstallStatus, Skill
from smoothie.skills.render import TemplateRenderer
from smoothie.skills.writer import SkillWriter
from smoothie.storage.paths import get_user_skills_dir

logger = logging.getLogger(__name__)

INTRO = "🌊 Smoothie Skills Installer"
OUTRO = "✓ Smoothie skills installed successfully!"
EDITOR_LABEL = "Which code editor do you use?"
SKILLS_LABEL = "Which Filament skills would you like to install?"
SKILLS_HINT = "Use space to select, enter to confirm"
INSTALLED_MARKER = "✓ (already installed)"


class Prompter(ABC):
    """User interaction needed by the installer."""

    @abstractmethod
    def select_one(self, label: str, options: dict[str, str]) -> str | None:
        """Ask the user to pick one option; returns its id or None if cancelled."""
        pass

    @abstractmethod
    def select_many(self, label: str, options: dict[str, str], hint: str = "") -> list[str]:
        """Ask the user to pick any number of options; returns their ids."""
        pass

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show an informational message; may span several lines."""
        pass

    @abstractmethod
    def warn(self, message: str) -> None:
        """Show a warning message."""
        pass


def installed_skills(environment: Environment, project_root: Path) -> set[str]:
    """Get the names of skills already installed for an environment.

    Args:
        environment: Environment to inspect.
        project_root: Project root.

    Returns:
        Names of the subdirectories of the environment's skills directory.
    """
    skills_dir = project_root / environment.skills_path
    if not skills_dir.is_dir():
        return set()

    return {item.name for item in skills_dir.iterdir() if item.is_dir()}


def format_results(results: dict[str, InstallStatus]) -> str:
    """Format per-skill outcomes as status lines."""
    return "\n".join(
        f"  {status.symbol} {name} {status.verb}" for name, status in results.items()
    )


class SkillInstaller:
    """Interactive skill installer."""

    def __init__(
        self,
        prompter: Prompter,
        project_root: Path,
        composer: SkillComposer | None = None,
        renderer: TemplateRenderer | None = None,
        mark_installed: bool = False,
    ):
        """Initialize the installer.

        Args:
            prompter: User interaction backend.
            project_root: Project to install skills into.
            composer: Skill catalog (default: bundled + project user skills).
            renderer: Template renderer passed to the writer.
            mark_installed: Flag skills that are already installed in the menu.
        """
        self.prompter = prompter
        self.project_root = Path(project_root)
        self.composer = composer or SkillComposer(user_path=get_user_skills_dir(self.project_root))
        self.renderer = renderer
        self.mark_installed = mark_installed

    def run(
        self,
        editor: str | None = None,
        skill_names: list[str] | None = None,
    ) -> dict[str, InstallStatus]:
        """Run the installation flow.

        Args:
            editor: Environment name; prompts when not given.
            skill_names: Skills to install; prompts when not given.

        Returns:
            Mapping of skill name to outcome (empty if nothing was installed).
        """
        self.prompter.notify(INTRO)

        environment = self.select_environment(editor)
        if environment is None:
            self.prompter.notify("Installation cancelled.")
            return {}

        available = self.composer.skills()
        if not available:
            self.prompter.warn("No skills available to install.")
            return {}

        selected = self.select_skills(environment, available, skill_names)
        if not selected:
            self.prompter.notify("No skills selected for installation.")
            return {}

        self.prompter.notify(f"Installing skills for {environment.label}...")
        writer = SkillWriter(environment, self.project_root, renderer=self.renderer)
        results = writer.write_all(selected)
        logger.debug(f"Install results: {results}")

        if results:
            self.prompter.notify(format_results(results))

        self.prompter.notify(OUTRO)
        return results

    def select_environment(self, editor: str | None = None) -> Environment | None:
        if editor is not None:
            environment = get_environment(editor)
            if environment is None:
                self.prompter.warn(f"Unknown editor: {editor}")
            return environment

        options = {env.name: env.label for env in all_environments()}
        selected = self.prompter.select_one(EDITOR_LABEL, options)
        if selected is None:
            return None
        return get_environment(selected)

    def select_skills(
        self,
        environment: Environment,
        available: dict[str, Skill],
        skill_names: list[str] | None = None,
    ) -> list[Skill]:
        if skill_names is not None:
            unknown = [name for name in skill_names if name not in available]
            for name in unknown:
                self.prompter.warn(f"Unknown skill: {name}")
            selected_names = [name for name in skill_names if name in available]
        else:
            installed = (
                installed_skills(environment, self.project_root) if self.mark_installed else set()
            )
            options = {
                name: self._label(skill, installed) for name, skill in available.items()
            }
            selected_names = self.prompter.select_many(SKILLS_LABEL, options, SKILLS_HINT)

        # Keep catalog order
        return [skill for name, skill in available.items() if name in selected_names]

    @staticmethod
    def _label(skill: Skill, installed: set[str]) -> str:
        if skill.name in installed:
            return f"{skill.display_name} {INSTALLED_MARKER}"
        return skill.display_name
