"""Command line interface for the stencil project generator."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from rich.console import Console

from . import __version__
from .config import TEMPLATE_ROOT, ProjectConfig
from .naming import validate_project_name, validate_project_title
from .package_manager import detect_from_environment
from .prompts import prompt_project_name, prompt_project_title
from .template import TemplateError, TemplateRenderer

LOGGER = logging.getLogger(__name__)

_console = Console(soft_wrap=True, highlight=False)
_err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stencil", description="Create a new project from the bundled template"
    )
    parser.add_argument(
        "project",
        nargs="*",
        help="Name of the new project, also used as its directory",
    )
    parser.add_argument("--title", help="Formatted project title")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every file the generator writes",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _error(message: str) -> int:
    _err_console.print(message, markup=False)
    return 1


def _format_cd(root: Path) -> str | None:
    if root.resolve() == Path.cwd().resolve():
        return None
    text = str(root)
    return f'cd "{text}"' if " " in text else f"cd {text}"


def _collect_config(project: str | None, title: str | None) -> ProjectConfig:
    name = project if project is not None else prompt_project_name()
    if title is None:
        title = prompt_project_title(name)
    return ProjectConfig.from_answers(
        name, title, package_manager=detect_from_environment()
    )


def _create(config: ProjectConfig, renderer: TemplateRenderer) -> None:
    root = config.root
    LOGGER.debug(
        "creating %s with title=%r package_manager=%s",
        root,
        config.title,
        config.package_manager_name,
    )

    _console.print(f"Setting up project in {root}...", markup=False)
    renderer.instantiate(TEMPLATE_ROOT, root, config.context())

    _console.print("All done! To get started, run:\n")
    cd_line = _format_cd(root)
    if cd_line is not None:
        _console.print(f"  {cd_line}", markup=False)
    for line in config.dev_directions():
        _console.print(f"  {line}", markup=False)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if len(args.project) > 1:
        return _error("Too many positional arguments. Expected 0 or 1.")

    project = args.project[0] if args.project else None
    if project is not None:
        result = validate_project_name(project)
        if result is not True:
            return _error(f'Invalid project name "{project}": {result}')

    if args.title is not None:
        result = validate_project_title(args.title)
        if result is not True:
            return _error(f'Invalid project title "{args.title}": {result}')

    try:
        config = _collect_config(project, args.title)
    except (KeyboardInterrupt, EOFError):
        return _error("Aborted.")

    try:
        _create(config, TemplateRenderer())
    except (TemplateError, OSError, ValueError) as exc:
        return _error(str(exc))

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
