"""Generate new projects from a bundled template tree.

The package validates project names and titles, sniffs the package manager
that launched it, and instantiates the template by copying plain files and
rendering ``.tmpl`` files with flat ``{{ key }}`` placeholders.
"""

from __future__ import annotations

from .config import TEMPLATE_ROOT, ProjectConfig
from .naming import to_title_case, validate_project_name, validate_project_title
from .package_manager import PackageManager, detect, dev_directions
from .template import TEMPLATE_SUFFIX, TemplateError, TemplateRenderer, instantiate

__all__ = [
    "PackageManager",
    "ProjectConfig",
    "TEMPLATE_ROOT",
    "TEMPLATE_SUFFIX",
    "TemplateError",
    "TemplateRenderer",
    "detect",
    "dev_directions",
    "instantiate",
    "to_title_case",
    "validate_project_name",
    "validate_project_title",
]

__version__ = "0.1.0"
