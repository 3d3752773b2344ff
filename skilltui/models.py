"""Data records, the service interface and the messages that drive the interface."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol

CENTRAL = "central"


@dataclass(frozen=True)
class Skill:
    """A skill found in the central skills directory."""

    name: str
    path: str = ""
    description: str = ""
    version: str = ""
    author: str = ""
    content: str = ""


@dataclass(frozen=True)
class Platform:
    """An agent platform that skills and plugins can be installed to."""

    name: str
    category: str = ""
    skills_dir: str = ""
    marketplaces_dir: str = ""
    installed: bool = False

    def is_target(self) -> bool:
        """Return whether skills can be linked into this platform."""
        return self.category != CENTRAL


@dataclass(frozen=True)
class PluginInfo:
    """One plugin shipped inside a marketplace."""

    name: str
    description: str = ""
    commands: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()


@dataclass(frozen=True)
class Marketplace:
    """A repository of plugins, either cloned locally or only known remotely."""

    name: str
    description: str = ""
    version: str = ""
    author: str = ""
    repo_url: str = ""
    status: str = ""
    tags: tuple[str, ...] = ()
    plugins: tuple[PluginInfo, ...] = ()

    @property
    def cloned(self) -> bool:
        return self.status == "cloned"


@dataclass
class Settings:
    """User-editable configuration."""

    theme: str = "mocha"
    accent_color: str = ""
    skills_path: str = ""
    plugins_path: str = ""


class Backend(Protocol):
    """The services the interface relies on; failures are raised as exceptions."""

    def list_skills(self, skills_path: str) -> list[Skill]:
        """Return every skill in the skills directory."""

    def get_skill(self, skills_path: str, name: str) -> Skill | None:
        """Return the named skill, or None if it does not exist."""

    def detect_platforms(self, settings: Settings) -> list[Platform]:
        """Return the known platforms and whether each is installed."""

    def is_linked(self, skills_dir: str, skill_name: str) -> bool:
        """Return whether a skill is installed into a platform directory."""

    def linked_platforms(self, platform_dirs: dict[str, str], skill_name: str) -> list[str]:
        """Return the names of platforms the skill is installed to."""

    def install_skill(self, skills_dir: str, source_path: str, skill_name: str) -> None:
        """Install a skill into a platform directory."""

    def uninstall_skill(self, skills_dir: str, skill_name: str) -> None:
        """Remove a skill from a platform directory."""

    def is_plugin_installed(self, platform: Platform, marketplace_name: str) -> bool:
        """Return whether a marketplace is installed on a platform."""

    def scan_marketplaces(self, plugins_path: str) -> list[Marketplace]:
        """Return the marketplaces cloned locally."""

    def fetch_available(self, timeout: float) -> list[Marketplace]:
        """Return the marketplaces listed by the remote registry."""

    def merge_marketplaces(
        self, local: list[Marketplace], remote: list[Marketplace]
    ) -> list[Marketplace]:
        """Combine local and remote marketplaces into one list."""

    def plugins_dir(self, plugins_path: str) -> str:
        """Return the directory marketplaces are cloned into."""

    def plugin_dir(self, plugins_path: str, name: str) -> str:
        """Return the local clone directory of a marketplace."""

    def remove_marketplace(self, plugins_path: str, name: str) -> None:
        """Delete a local marketplace clone."""

    def add_by_repo(self, plugins_path: str, repo: str, timeout: float) -> Marketplace:
        """Clone a repository and return it as a marketplace."""

    def supports_plugins(self, platform_name: str) -> bool:
        """Return whether plugins can be installed on the platform."""

    def platform_cli(self, platform_name: str) -> str:
        """Return the platform's command-line tool, or "" if it has none."""

    def install_marketplace_via_cli(
        self,
        platform_name: str,
        repo_source: str,
        local_path: str,
        marketplace_name: str,
        plugin_names: list[str],
    ) -> None:
        """Install a marketplace's plugins with the platform's own tool."""

    def uninstall_marketplace_via_cli(self, platform_name: str, plugin_names: list[str]) -> None:
        """Remove plugins with the platform's own tool."""

    def save_settings(self, settings: Settings) -> None:
        """Persist the settings."""

    def open_path(self, path: str) -> None:
        """Open a path with the desktop's default handler."""


@dataclass(frozen=True)
class WindowSize:
    width: int
    height: int


@dataclass(frozen=True)
class MouseClick:
    """A left-button press at a screen cell."""

    x: int
    y: int


@dataclass(frozen=True)
class MarketplaceCloned:
    marketplace: Marketplace | None = None
    error: Exception | None = None


@dataclass(frozen=True)
class MarketplaceInstalled:
    marketplace: Marketplace | None = None
    error: Exception | None = None
    platforms: tuple[str, ...] = ()


@dataclass(frozen=True)
class ClearStatus:
    """Asks the interface to drop its status message."""


@dataclass(frozen=True)
class Quit:
    """A command asking the program to exit."""


@dataclass(frozen=True)
class ClearStatusAfter:
    """A command asking for a ClearStatus message after a delay in seconds."""

    delay: float = 5.0


@dataclass(frozen=True)
class Task:
    """A command that does slow work and returns the resulting message."""

    run: Callable[[], Any] = field(compare=False)

    def __call__(self) -> Any:
        return self.run()