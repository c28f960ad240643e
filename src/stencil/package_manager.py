"""Detect the package manager that launched the generator."""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DEFAULT_PACKAGE_MANAGER",
    "USER_AGENT_ENV",
    "PackageManager",
    "detect",
    "detect_from_environment",
    "dev_directions",
]


USER_AGENT_ENV = "npm_config_user_agent"
DEFAULT_PACKAGE_MANAGER = "npm"


class PackageManager(BaseModel):
    """Name and version parsed from a package manager user agent."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Executable name of the package manager, e.g. 'npm'.")
    version: str = Field(..., description="Version reported by the package manager.")


def detect(user_agent: str | None) -> PackageManager | None:
    """Parse ``user_agent`` such as ``"npm/9.0.0 node/v18 darwin arm64"``.

    Only the text before the first space is inspected. ``None`` is returned
    when the string is empty, starts with a space, or the token lacks a name
    or version.
    """

    if not user_agent:
        return None

    token = user_agent.split(" ", 1)[0]
    if not token:
        return None

    name, _, version = token.partition("/")
    version = version.split("/", 1)[0]
    if not name or not version:
        return None

    return PackageManager(name=name, version=version)


def detect_from_environment(environ: Mapping[str, str] | None = None) -> PackageManager | None:
    """Run :func:`detect` against :data:`USER_AGENT_ENV`."""

    env = os.environ if environ is None else environ
    return detect(env.get(USER_AGENT_ENV))


def dev_directions(manager: str) -> list[str]:
    """Return the commands a user runs to install and start the new project."""

    if manager == "yarn":
        return ["yarn", "yarn dev"]
    return [f"{manager} install", f"{manager} run dev"]
