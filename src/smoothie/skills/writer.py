"""
Skill writer for Smoothie.

Copies skill bundles into an environment's skills directory, rendering
Blade templates to Markdown on the way, and registers each installed skill
with the environment.
"""

import logging
import re
import shutil
from collections.abc import Iterable, Mapping
from pathlib import Path

from smoothie.environments import Environment
from smoothie.skills.models import InstallStatus, Skill
from smoothie.skills.parser import normalize_description
from smoothie.skills.render import RENDERED_SUFFIX, TEMPLATE_SUFFIX, BladeRenderer, TemplateRenderer
from smoothie.storage.paths import ensure_directory

logger = logging.getLogger(__name__)

_SKILL_NAME = re.compile(r"^[a-z0-9_-]+$", re.IGNORECASE)

INSTRUCTIONS_DIR = "instructions"
INSTRUCTIONS_SUFFIX = ".instructions.md"


class InvalidSkillNameError(ValueError):
    """Skill name is not a safe directory name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid skill name: {name}")


def is_valid_skill_name(name: str) -> bool:
    """Check that a skill name is letters, digits, dashes and underscores only."""
    return _SKILL_NAME.fullmatch(name) is not None


def rendered_name(filename: str) -> str:
    """Get the output filename for a template (foo.blade.php -> foo.md)."""
    return filename[: -len(TEMPLATE_SUFFIX)] + RENDERED_SUFFIX


def instruction_file_content(skill: Skill, environment: Environment) -> str:
    """Build the instruction document that registers a skill.

    Args:
        skill: The installed skill.
        environment: The environment it was installed for.

    Returns:
        Markdown with an applyTo frontmatter scoped to the skill's files.
    """
    apply_to = f"{environment.skills_path}/{skill.name}/**"
    return (
        "---\n"
        f'applyTo: "{apply_to}"\n'
        "---\n"
        "\n"
        f"# {skill.name}\n"
        "\n"
        f"{normalize_description(skill.description)}\n"
    )


class SkillWriter:
    """Installs skills into one code environment."""

    def __init__(
        self,
        environment: Environment,
        project_root: Path,
        renderer: TemplateRenderer | None = None,
    ):
        """Initialize the writer.

        Args:
            environment: Target environment.
            project_root: Project the environment directories live in.
            renderer: Template renderer (default: BladeRenderer).
        """
        self.environment = environment
        self.project_root = Path(project_root)
        self.renderer = renderer or BladeRenderer()

    @property
    def skills_dir(self) -> Path:
        return self.project_root / self.environment.skills_path

    def write(self, skill: Skill) -> InstallStatus:
        """Install a single skill.

        Args:
            skill: Skill to install.

        Returns:
            CREATED for a fresh install, UPDATED if the skill was already
            installed, FAILED if its files could not be copied.

        Raises:
            InvalidSkillNameError: If the skill name is not a safe identifier.
        """
        if not is_valid_skill_name(skill.name):
            raise InvalidSkillNameError(skill.name)

        target = self.skills_dir / skill.name
        existed = target.is_dir()

        if not self._copy_directory(skill.path, target):
            return InstallStatus.FAILED

        self._register(skill)

        return InstallStatus.UPDATED if existed else InstallStatus.CREATED

    def write_all(self, skills: Mapping[str, Skill] | Iterable[Skill]) -> dict[str, InstallStatus]:
        """Install each skill independently.

        Args:
            skills: Skills to install, as a list or a name-to-skill mapping.

        Returns:
            Mapping of skill name to outcome.
        """
        if isinstance(skills, Mapping):
            skills = skills.values()

        return {skill.name: self.write(skill) for skill in skills}

    def _copy_directory(self, source: Path, target: Path) -> bool:
        if not source.is_dir():
            logger.warning(f"Skill source directory does not exist: {source}")
            return False

        try:
            ensure_directory(target)
            for file in sorted(source.rglob("*")):
                if file.is_file():
                    self._copy_file(file, source, target)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to copy {source} to {target}: {e}")
            return False

        return True

    def _copy_file(self, file: Path, source: Path, target: Path) -> None:
        relative = file.relative_to(source)
        destination = target / relative
        ensure_directory(destination.parent)

        if file.name.endswith(TEMPLATE_SUFFIX):
            rendered = self.renderer.render(file.read_text(encoding="utf-8")).strip()
            destination.with_name(rendered_name(file.name)).write_text(rendered, encoding="utf-8")
            return

        shutil.copyfile(file, destination)

    def _register(self, skill: Skill) -> None:
        """Register an installed skill with the environment.

        Best effort: failures are logged and never change the install outcome.
        """
        if not self.environment.supports_instruction_files():
            return

        guidelines = self.project_root / self.environment.guidelines_path()
        if not guidelines.is_file():
            logger.debug(f"No guidelines file at {guidelines}, not registering {skill.name}")
            return

        instructions_dir = guidelines.parent / INSTRUCTIONS_DIR
        instruction_file = instructions_dir / f"{skill.name}{INSTRUCTIONS_SUFFIX}"

        try:
            ensure_directory(instructions_dir)
            instruction_file.write_text(
                instruction_file_content(skill, self.environment), encoding="utf-8"
            )
        except OSError as e:
            logger.warning(f"Could not register {skill.name} in {instructions_dir}: {e}")
