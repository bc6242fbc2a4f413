"""
Code environment registry for Smoothie.

A code environment is an editor or coding agent that skills can be installed
for. Each one has its own directory for installed skills and its own
guidelines document.
"""

from pydantic import BaseModel, ConfigDict, Field


class Environment(BaseModel):
    """A target editor or agent integration."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique identifier (e.g. vscode)")
    label: str = Field(..., description="Human-readable name shown in menus")
    skills_path: str = Field(..., description="Install directory, relative to the project root")
    guidelines_file: str = Field(..., description="Guidelines document, relative to the project root")
    instruction_files: bool = Field(
        default=True,
        description="Whether per-skill instruction files (applyTo patterns) are generated",
    )

    def guidelines_path(self) -> str:
        """Get the path to the environment's guidelines document."""
        return self.guidelines_file

    def supports_instruction_files(self) -> bool:
        """Whether this environment reads per-skill instruction files.

        VS Code/GitHub Copilot uses instruction files, Claude Code does not:
        its skills are self-contained.
        """
        return self.instruction_files


ENVIRONMENTS: tuple[Environment, ...] = (
    Environment(
        name="vscode",
        label="VS Code / GitHub Copilot",
        skills_path=".github/skills/filament-development",
        guidelines_file=".github/copilot-instructions.md",
    ),
    Environment(
        name="phpstorm",
        label="PhpStorm",
        skills_path=".junie/skills/filament-development",
        guidelines_file=".junie/guidelines.md",
    ),
    Environment(
        name="cursor",
        label="Cursor",
        skills_path=".cursor/skills/filament-development",
        guidelines_file=".cursor/rules/filament.md",
    ),
    Environment(
        name="claude_code",
        label="Claude Code",
        skills_path=".claude/skills/filament-development",
        guidelines_file="CLAUDE.md",
        instruction_files=False,
    ),
    Environment(
        name="codex",
        label="Codex",
        skills_path=".codex/skills/filament-development",
        guidelines_file="AGENTS.md",
    ),
    Environment(
        name="gemini",
        label="Gemini",
        skills_path=".gemini/skills/filament-development",
        guidelines_file="GEMINI.md",
    ),
    Environment(
        name="opencode",
        label="OpenCode",
        skills_path=".opencode/skills/filament-development",
        guidelines_file="AGENTS.md",
    ),
)

_BY_NAME: dict[str, Environment] = {}
for _environment in ENVIRONMENTS:
    # First definition wins
    _BY_NAME.setdefault(_environment.name, _environment)


def all_environments() -> list[Environment]:
    """Get every environment, in menu order."""
    return list(ENVIRONMENTS)


def get_environment(name: str) -> Environment | None:
    """Look up an environment by name.

    Args:
        name: Environment name (e.g. "cursor").

    Returns:
        The environment, or None if no environment has that name.
    """
    return _BY_NAME.get(name)
