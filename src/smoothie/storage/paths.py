"""
Path utilities for Smoothie.

Provides consistent path resolution for bundled skills, the project root,
and project-local configuration.
"""

import os
from pathlib import Path

PROJECT_CONFIG_FILENAME = ".smoothie.yaml"
DEFAULT_USER_SKILLS_PATH = ".ai/smoothie"


def get_resources_dir() -> Path:
    """
    Get the directory holding the resources shipped with the package.

    Returns:
        Path to smoothie/resources/
    """
    return Path(__file__).resolve().parent.parent / "resources"


def get_bundled_skills_dir() -> Path:
    """
    Get the bundled skills directory.

    Returns:
        Path to smoothie/resources/filament/4/skills/
    """
    return get_resources_dir() / "filament" / "4" / "skills"


def get_project_root(path: str | Path | None = None) -> Path:
    """
    Get the project root that skills are installed into.

    Resolution order:
    1. Explicit path argument
    2. SMOOTHIE_PROJECT environment variable
    3. Default: current working directory

    Returns:
        Resolved project root.
    """
    if path is not None:
        return expand_path(path)

    env_root = os.environ.get("SMOOTHIE_PROJECT")
    if env_root:
        return expand_path(env_root)

    return Path.cwd().resolve()


def get_project_config_path(project_root: Path) -> Path:
    """
    Get the path to the project configuration file.

    Returns:
        Path to <project>/.smoothie.yaml
    """
    return project_root / PROJECT_CONFIG_FILENAME


def get_user_skills_dir(project_root: Path, relative: str = DEFAULT_USER_SKILLS_PATH) -> Path:
    """
    Get the directory holding project-authored skills.

    Args:
        project_root: The project root.
        relative: Location of the user skills, relative to the project root.

    Returns:
        Path to <project>/.ai/smoothie by default.
    """
    return project_root / relative


def expand_path(path: str | Path) -> Path:
    """
    Expand a path string, handling ~ and environment variables.

    Args:
        path: Path string or Path object.

    Returns:
        Expanded and resolved Path.
    """
    if isinstance(path, str):
        path = os.path.expandvars(path)
        path = os.path.expanduser(path)
    return Path(path).resolve()


def ensure_directory(path: Path, mode: int = 0o755) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path.
        mode: Permission mode for created directories.

    Returns:
        The path (for chaining).
    """
    path.mkdir(parents=True, exist_ok=True, mode=mode)
    return path
