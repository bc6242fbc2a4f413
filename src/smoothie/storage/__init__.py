"""
Storage utilities for Smoothie.

Provides path resolution for bundled resources and project directories.
"""

from smoothie.storage.paths import (
    ensure_directory,
    expand_path,
    get_bundled_skills_dir,
    get_project_config_path,
    get_project_root,
    get_resources_dir,
    get_user_skills_dir,
)

__all__ = [
    "ensure_directory",
    "expand_path",
    "get_bundled_skills_dir",
    "get_project_config_path",
    "get_project_root",
    "get_resources_dir",
    "get_user_skills_dir",
]
