"""Validation and formatting helpers for project names and titles."""

from __future__ import annotations

import re
from pathlib import Path

__all__ = ["to_title_case", "validate_project_name", "validate_project_title"]


_IDENTIFIER = re.compile(r"[^\W\d]\w*", re.ASCII)
_CONTROL_CHARACTERS = re.compile(r"[\x00-\x1f]")
_WHITESPACE = re.compile(r"\s+")


def validate_project_name(project_name: str | Path) -> bool | str:
    """Return ``True`` when ``project_name`` is usable, else the rejection reason.

    The name doubles as the output directory, so an existing path on disk is
    rejected before the syntactic checks run.
    """

    text = str(project_name)
    if text and Path(text).exists():
        return "Project directory already exists."

    if not text:
        return "Project name must be at least 1 character long."

    if _IDENTIFIER.fullmatch(text) is None:
        return "Project name must contain only alphanumerics or underscore with no leading digits."

    return True


def validate_project_title(project_title: str) -> bool | str:
    """Return ``True`` when ``project_title`` is usable, else the rejection reason."""

    if not project_title:
        return "Project title must be at least 1 character long."

    if _CONTROL_CHARACTERS.search(project_title):
        return "Project title may not contain control characters."

    return True


def to_title_case(name: str) -> str:
    """Turn ``my_cool_app`` into ``My Cool App``."""

    words = _WHITESPACE.split(name.lower().replace("_", " "))
    return " ".join(word[0].upper() + word[1:] for word in words if word)
