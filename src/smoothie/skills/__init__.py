"""
Smoothie skills system.

A skill is a directory holding a SKILL.blade.php file (plus any supporting
files) that teaches a coding assistant how to work with part of Filament.

Usage:
    from smoothie.environments import get_environment
    from smoothie.skills import SkillComposer, SkillWriter

    composer = SkillComposer()
    writer = SkillWriter(get_environment("cursor"), project_root)
    results = writer.write_all(composer.skills())
"""

# Models
from smoothie.skills.models import (
    BUNDLED_PACKAGE,
    USER_PACKAGE,
    InstallStatus,
    Skill,
)

# Parser
from smoothie.skills.parser import (
    DEFAULT_DESCRIPTION,
    SKILL_FILE,
    extract_description,
    normalize_description,
    read_description,
)

# Rendering
from smoothie.skills.render import (
    RENDERED_SUFFIX,
    TEMPLATE_SUFFIX,
    BladeRenderer,
    GuidelineAssist,
    TemplateRenderer,
    blade_to_jinja,
)

# Discovery
from smoothie.skills.composer import (
    SkillComposer,
    discover_skills_in_directory,
)

# Writer
from smoothie.skills.writer import (
    InvalidSkillNameError,
    SkillWriter,
    instruction_file_content,
    is_valid_skill_name,
)

__all__ = [
    # Models
    "BUNDLED_PACKAGE",
    "USER_PACKAGE",
    "InstallStatus",
    "Skill",
    # Parser
    "DEFAULT_DESCRIPTION",
    "SKILL_FILE",
    "extract_description",
    "normalize_description",
    "read_description",
    # Rendering
    "RENDERED_SUFFIX",
    "TEMPLATE_SUFFIX",
    "BladeRenderer",
    "GuidelineAssist",
    "TemplateRenderer",
    "blade_to_jinja",
    # Discovery
    "SkillComposer",
    "discover_skills_in_directory",
    # Writer
    "InvalidSkillNameError",
    "SkillWriter",
    "instruction_file_content",
    "is_valid_skill_name",
]
