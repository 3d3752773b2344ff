import pytest

from skilltui.models import (
    ClearStatus,
    ClearStatusAfter,
    Marketplace,
    MarketplaceInstalled,
    Platform,
    PluginInfo,
    Quit,
    Settings,
    Skill,
    Task,
    WindowSize,
)


def test_central_platform_is_not_a_target():
    assert Platform(name="agents", category="central").is_target() is False


def test_other_platform_is_a_target():
    assert Platform(name="claude-code", category="cli", installed=True).is_target() is True


def test_marketplace_cloned_follows_status():
    assert Marketplace(name="m", status="cloned").cloned is True
    assert Marketplace(name="m", status="missing").cloned is False


def test_marketplace_defaults_are_empty():
    mp = Marketplace(name="m")
    assert mp.plugins == ()
    assert mp.tags == ()
    assert mp.repo_url == ""


def test_plugin_info_holds_lists():
    info = PluginInfo(name="p", commands=("a", "b"))
    assert info.commands == ("a", "b")
    assert info.skills == ()


def test_skill_is_immutable():
    skill = Skill(name="s")
    with pytest.raises(AttributeError):
        skill.name = "t"
    assert skill.name == "s"


def test_settings_are_editable():
    settings = Settings()
    assert settings.theme == "mocha"
    settings.skills_path = "/tmp/skills"
    assert settings.skills_path == "/tmp/skills"


def test_task_runs_its_callable():
    task = Task(lambda: WindowSize(3, 4))
    assert task() == WindowSize(3, 4)


def test_messages_compare_by_value():
    assert ClearStatus() == ClearStatus()
    assert Quit() == Quit()
    assert ClearStatusAfter(5) == ClearStatusAfter(5.0)
    installed = MarketplaceInstalled(platforms=("a",))
    assert installed.error is None
    assert installed.platforms == ("a",)