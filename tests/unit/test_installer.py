"""
Unit tests for the installation flow.
"""

import pytest

from smoothie.installer import (
    EDITOR_LABEL,
    INTRO,
    OUTRO,
    SKILLS_LABEL,
    SkillInstaller,
    format_results,
    installed_skills,
)
from smoothie.environments import get_environment
from smoothie.skills import InstallStatus, SkillComposer


@pytest.fixture
def composer(bundled_dir, user_dir, make_skill) -> SkillComposer:
    make_skill(bundled_dir, "actions", "Designs actions")
    make_skill(bundled_dir, "forms", "Builds forms")
    make_skill(user_dir, "reports", "Project reports")
    return SkillComposer(bundled_dir, user_dir)


class TestInstalledSkills:
    """Tests for detecting already-installed skills."""

    def test_no_install_directory(self, project_dir):
        assert installed_skills(get_environment("cursor"), project_dir) == set()

    def test_lists_subdirectories_only(self, project_dir):
        skills_dir = project_dir / ".cursor/skills/filament-development"
        (skills_dir / "forms").mkdir(parents=True)
        (skills_dir / "notes.md").write_text("x")

        assert installed_skills(get_environment("cursor"), project_dir) == {"forms"}


def test_format_results():
    results = {
        "actions": InstallStatus.CREATED,
        "forms": InstallStatus.UPDATED,
        "tables": InstallStatus.FAILED,
    }
    assert format_results(results) == (
        "  ✓ actions installed\n  ↻ forms updated\n  ✗ tables failed"
    )


class TestSkillInstaller:
    """Tests for the interactive flow."""

    def test_full_flow(self, project_dir, composer, fake_prompter, make_guidelines):
        make_guidelines(project_dir, "cursor")
        prompter = fake_prompter(editor="cursor", skills=["forms", "reports"])

        results = SkillInstaller(prompter, project_dir, composer=composer).run()

        assert results == {"forms": InstallStatus.CREATED, "reports": InstallStatus.CREATED}
        assert (project_dir / ".cursor/skills/filament-development/forms/SKILL.md").exists()
        assert (project_dir / ".cursor/rules/instructions/reports.instructions.md").exists()
        assert prompter.messages[0] == INTRO
        assert "Installing skills for Cursor..." in prompter.messages
        assert "  ✓ forms installed\n  ✓ reports installed" in prompter.messages
        assert prompter.messages[-1] == OUTRO
        assert prompter.warnings == []

    def test_editor_menu_lists_all_environments(self, project_dir, composer, fake_prompter):
        prompter = fake_prompter(editor=None)

        SkillInstaller(prompter, project_dir, composer=composer).run()

        label, options = prompter.questions[0]
        assert label == EDITOR_LABEL
        assert list(options) == [
            "vscode",
            "phpstorm",
            "cursor",
            "claude_code",
            "codex",
            "gemini",
            "opencode",
        ]
        assert options["claude_code"] == "Claude Code"

    def test_cancelled_editor(self, project_dir, composer, fake_prompter):
        prompter = fake_prompter(editor=None)

        assert SkillInstaller(prompter, project_dir, composer=composer).run() == {}
        assert "Installation cancelled." in prompter.messages
        assert list(project_dir.iterdir()) == [project_dir / ".ai"]

    def test_unknown_preselected_editor(self, project_dir, composer, fake_prompter):
        prompter = fake_prompter()

        assert SkillInstaller(prompter, project_dir, composer=composer).run(editor="emacs") == {}
        assert prompter.warnings == ["Unknown editor: emacs"]
        assert prompter.questions == []

    def test_no_skills_available(self, project_dir, temp_dir, fake_prompter):
        prompter = fake_prompter(editor="cursor")
        composer = SkillComposer(temp_dir / "none", temp_dir / "none")

        assert SkillInstaller(prompter, project_dir, composer=composer).run() == {}
        assert prompter.warnings == ["No skills available to install."]

    def test_no_skills_selected(self, project_dir, composer, fake_prompter):
        prompter = fake_prompter(editor="cursor", skills=[])

        assert SkillInstaller(prompter, project_dir, composer=composer).run() == {}
        assert "No skills selected for installation." in prompter.messages
        assert not (project_dir / ".cursor").exists()

    def test_skill_menu_labels(self, project_dir, composer, fake_prompter):
        prompter = fake_prompter(editor="cursor")

        SkillInstaller(prompter, project_dir, composer=composer).run()

        label, options = prompter.questions[-1]
        assert label == SKILLS_LABEL
        assert options == {"actions": "actions", "forms": "forms", "reports": ".ai/reports*"}

    def test_mark_installed(self, project_dir, composer, fake_prompter):
        (project_dir / ".cursor/skills/filament-development/forms").mkdir(parents=True)
        prompter = fake_prompter(editor="cursor")

        SkillInstaller(prompter, project_dir, composer=composer, mark_installed=True).run()

        _, options = prompter.questions[-1]
        assert options["forms"] == "forms ✓ (already installed)"
        assert options["actions"] == "actions"

    def test_installed_not_marked_by_default(self, project_dir, composer, fake_prompter):
        (project_dir / ".cursor/skills/filament-development/forms").mkdir(parents=True)
        prompter = fake_prompter(editor="cursor")

        SkillInstaller(prompter, project_dir, composer=composer).run()

        _, options = prompter.questions[-1]
        assert options["forms"] == "forms"

    def test_reinstall_reports_update(self, project_dir, composer, fake_prompter):
        installer = SkillInstaller(
            fake_prompter(editor="gemini", skills=["actions"]), project_dir, composer=composer
        )
        installer.run()

        prompter = fake_prompter(editor="gemini", skills=["actions"])
        installer.prompter = prompter

        assert installer.run() == {"actions": InstallStatus.UPDATED}
        assert "  ↻ actions updated" in prompter.messages

    def test_preselected_skills_skip_prompt(self, project_dir, composer, fake_prompter):
        prompter = fake_prompter()

        results = SkillInstaller(prompter, project_dir, composer=composer).run(
            editor="claude_code", skill_names=["forms", "missing", "actions"]
        )

        assert list(results) == ["actions", "forms"]
        assert prompter.questions == []
        assert prompter.warnings == ["Unknown skill: missing"]

    def test_default_composer_uses_project_skills(
        self, project_dir, user_dir, make_skill, fake_prompter, make_guidelines
    ):
        make_guidelines(project_dir, "codex")
        make_skill(user_dir, "reports", "Project reports")
        prompter = fake_prompter(editor="codex", skills=["reports"])

        results = SkillInstaller(prompter, project_dir).run()

        assert results == {"reports": InstallStatus.CREATED}
        assert (project_dir / ".codex/skills/filament-development/reports/SKILL.md").exists()
        assert (project_dir / "instructions/reports.instructions.md").exists()
