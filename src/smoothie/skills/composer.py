"""
Skill discovery for Smoothie.

Discovers skills from the bundled skills directory and from the project's
user skills directory (.ai/smoothie/ by default).
"""

import logging
from pathlib import Path

from smoothie.skills.models import BUNDLED_PACKAGE, USER_PACKAGE, Skill
from smoothie.skills.parser import SKILL_FILE, read_description
from smoothie.storage.paths import get_bundled_skills_dir, get_project_root, get_user_skills_dir

logger = logging.getLogger(__name__)


def discover_skills_in_directory(directory: Path, package: str) -> dict[str, Skill]:
    """Discover all skills directly inside a directory.

    A skill is an immediate, non-hidden subdirectory containing SKILL.blade.php.

    Args:
        directory: Directory to search.
        package: Origin tag for the discovered skills.

    Returns:
        Mapping of skill name to skill, sorted by name.
    """
    if not directory.is_dir():
        return {}

    skills: dict[str, Skill] = {}
    for item in sorted(directory.iterdir(), key=lambda p: p.name):
        if not item.is_dir() or item.name.startswith("."):
            continue

        skill_file = item / SKILL_FILE
        if not skill_file.is_file():
            continue

        skills[item.name] = Skill(
            name=item.name,
            package=package,
            path=item.resolve(),
            description=read_description(skill_file),
        )

    return skills


class SkillComposer:
    """Builds the catalog of installable skills.

    The catalog is computed on first use and cached until reset_skills()
    is called.
    """

    def __init__(
        self,
        bundled_path: Path | None = None,
        user_path: Path | None = None,
    ):
        """Initialize the composer.

        Args:
            bundled_path: Bundled skills root (default: the package resources).
            user_path: User skills root (default: .ai/smoothie in the project).
        """
        self.bundled_path = bundled_path or get_bundled_skills_dir()
        self.user_path = user_path or get_user_skills_dir(get_project_root())
        self._skills: dict[str, Skill] | None = None

    def skills(self) -> dict[str, Skill]:
        """Get all discovered skills, bundled first and user skills on top.

        A user skill replaces a bundled skill with the same name.
        """
        if self._skills is not None:
            return self._skills

        skills = dict(self._bundled_skills())
        skills.update(self._user_skills())
        logger.debug(f"Discovered {len(skills)} skill(s)")

        self._skills = skills
        return skills

    def reset_skills(self) -> "SkillComposer":
        """Forget the cached catalog so the next skills() call rescans."""
        self._skills = None
        return self

    def _bundled_skills(self) -> dict[str, Skill]:
        return discover_skills_in_directory(self.bundled_path, BUNDLED_PACKAGE)

    def _user_skills(self) -> dict[str, Skill]:
        discovered = discover_skills_in_directory(self.user_path, USER_PACKAGE)
        return {name: skill.with_custom(True) for name, skill in discovered.items()}
