"""
Skill models for Smoothie.

Defines the skill bundle value and the outcome of installing one.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

BUNDLED_PACKAGE = "smoothie"
USER_PACKAGE = "user"


class Skill(BaseModel):
    """A discoverable skill bundle.

    Skills are immutable; use with_custom() to get a re-tagged copy.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Skill identifier (directory name)")
    package: str = Field(..., description="Origin tag (smoothie or user)")
    path: Path = Field(..., description="Source directory containing the skill files")
    description: str = Field(..., description="Short description from the skill file")
    custom: bool = Field(default=False, description="Whether the skill is project-authored")

    @property
    def display_name(self) -> str:
        """Get the label shown in selection menus.

        Custom skills are marked so they stand out from bundled ones.
        """
        if self.custom:
            return f".ai/{self.name}*"
        return self.name

    def with_custom(self, custom: bool) -> "Skill":
        """Return a copy of this skill with the custom flag set."""
        return self.model_copy(update={"custom": custom})


class InstallStatus(str, Enum):
    """Outcome of writing one skill into an environment."""

    CREATED = "created"
    UPDATED = "updated"
    FAILED = "failed"

    @property
    def symbol(self) -> str:
        """Get the status marker used in result listings."""
        return _SYMBOLS[self]

    @property
    def verb(self) -> str:
        """Get the past-tense verb used in result listings."""
        return _VERBS[self]


_SYMBOLS = {
    InstallStatus.CREATED: "✓",
    InstallStatus.UPDATED: "↻",
    InstallStatus.FAILED: "✗",
}

_VERBS = {
    InstallStatus.CREATED: "installed",
    InstallStatus.UPDATED: "updated",
    InstallStatus.FAILED: "failed",
}
