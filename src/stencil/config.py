"""Configuration shared by the interactive driver and the template walker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .package_manager import DEFAULT_PACKAGE_MANAGER, PackageManager, dev_directions

__all__ = ["ProjectConfig", "TEMPLATE_ROOT"]


TEMPLATE_ROOT = Path(__file__).resolve().parent / "templates"
"""Template tree bundled with the package and copied into every new project."""


@dataclass(slots=True)
class ProjectConfig:
    """Answers describing the project that is about to be generated.

    Attributes
    ----------
    name:
        The project name. It is also the path of the output directory,
        relative to the current working directory unless absolute.
    title:
        The human friendly title shown in generated documents. ``None`` leaves
        ``project_title`` out of the substitution context.
    package_manager:
        The package manager detected from the environment, if any. When
        missing the instructions fall back to :data:`DEFAULT_PACKAGE_MANAGER`.
    """

    name: str
    title: str | None = None
    package_manager: PackageManager | None = None

    @classmethod
    def from_answers(
        cls,
        name: str,
        title: str | None = None,
        *,
        package_manager: PackageManager | None = None,
    ) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` from prompt or command line answers."""

        project_name = name.strip()
        if not project_name:
            raise ValueError("project name must not be empty")

        return cls(name=project_name, title=title, package_manager=package_manager)

    @property
    def root(self) -> Path:
        """Directory the project is written to."""

        return Path(self.name)

    @property
    def package_manager_name(self) -> str:
        if self.package_manager is None:
            return DEFAULT_PACKAGE_MANAGER
        return self.package_manager.name

    def dev_directions(self) -> list[str]:
        """Commands the user should run once the project exists."""

        return dev_directions(self.package_manager_name)

    def context(self) -> Mapping[str, str]:
        """Return the substitution context for the template walker."""

        context = {
            "project_name": self.name,
            "dev_instructions": "\n".join(f"$ {line}" for line in self.dev_directions()),
        }
        if self.title is not None:
            context["project_title"] = self.title
        return context
