"""
Pydantic configuration schema for Smoothie.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from smoothie.storage.paths import DEFAULT_USER_SKILLS_PATH

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class SmoothieConfig(BaseModel):
    """Installer configuration."""

    model_config = ConfigDict(extra="ignore")

    editor: str | None = Field(
        default=None,
        description="Environment to install for without prompting (e.g. cursor)",
    )
    user_skills_path: str = Field(
        default=DEFAULT_USER_SKILLS_PATH,
        description="Project-authored skills directory, relative to the project root",
    )
    log_level: LogLevel = "WARNING"
