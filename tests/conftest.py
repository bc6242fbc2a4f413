"""
Pytest configuration and fixtures for smoothie tests.
"""

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from smoothie.installer import Prompter

SkillFactory = Callable[..., Path]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SMOOTHIE_* variables from the developer's shell out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("SMOOTHIE_"):
            monkeypatch.delenv(key)


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Provide an empty project directory."""
    project = temp_dir / "project"
    project.mkdir()
    return project


@pytest.fixture
def bundled_dir(temp_dir: Path) -> Path:
    """Provide an empty bundled skills root."""
    bundled = temp_dir / "bundled"
    bundled.mkdir()
    return bundled


@pytest.fixture
def user_dir(project_dir: Path) -> Path:
    """Provide the project's user skills root (.ai/smoothie)."""
    user = project_dir / ".ai" / "smoothie"
    user.mkdir(parents=True)
    return user


def skill_file_content(name: str, description: str | None) -> str:
    """Build SKILL.blade.php content with a folded description."""
    lines = ["---", f"name: {name}"]
    if description is not None:
        lines.append("description: >-")
        lines.extend(f"  {line}" for line in description.splitlines())
    lines.append("---")
    lines.append("@php")
    lines.append("/** @var \\Laravel\\Boost\\Install\\GuidelineAssist $assist */")
    lines.append("@endphp")
    lines.append(f"# {name.title()}")
    lines.append("")
    lines.append(f"Instructions for {name}.")
    return "\n".join(lines) + "\n"


@pytest.fixture
def make_skill() -> SkillFactory:
    """Provide a factory that writes a skill directory under a root."""

    def factory(
        root: Path,
        name: str,
        description: str | None = "A test skill",
        extra_files: dict[str, str] | None = None,
    ) -> Path:
        skill_dir = root / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        (skill_dir / "SKILL.blade.php").write_text(skill_file_content(name, description))
        for relative, content in (extra_files or {}).items():
            path = skill_dir / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return skill_dir

    return factory


class FakePrompter(Prompter):
    """Prompter that answers from a script and records everything it is asked."""

    def __init__(self, editor: str | None = None, skills: list[str] | None = None):
        self.editor = editor
        self.skills = skills or []
        self.questions: list[tuple[str, dict[str, str]]] = []
        self.messages: list[str] = []
        self.warnings: list[str] = []

    def select_one(self, label: str, options: dict[str, str]) -> str | None:
        self.questions.append((label, options))
        return self.editor

    def select_many(self, label: str, options: dict[str, str], hint: str = "") -> list[str]:
        self.questions.append((label, options))
        return list(self.skills)

    def notify(self, message: str) -> None:
        self.messages.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)


@pytest.fixture
def fake_prompter() -> type[FakePrompter]:
    """Provide the scripted prompter class."""
    return FakePrompter


@pytest.fixture
def make_guidelines() -> Callable[[Path, str], Path]:
    """Provide a factory that creates an environment's guidelines document."""
    from smoothie.environments import get_environment

    def factory(project: Path, editor: str) -> Path:
        guidelines = project / get_environment(editor).guidelines_path()
        guidelines.parent.mkdir(parents=True, exist_ok=True)
        guidelines.write_text("# Guidelines\n")
        return guidelines

    return factory
