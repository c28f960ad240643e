"""Placeholder substitution and template tree instantiation."""

from __future__ import annotations

import logging
import re
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

__all__ = [
    "TEMPLATE_SUFFIX",
    "TemplateError",
    "TemplateRenderer",
    "instantiate",
]


LOGGER = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".tmpl"

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>\w+)\s*}}")


class TemplateError(RuntimeError):
    """Raised when a template references a key missing from the context."""

    def __init__(self, key: str) -> None:
        super().__init__(f"no template variable '{key}'")
        self.key = key


@dataclass(slots=True)
class TemplateRenderer:
    """Render ``{{ key }}`` placeholders and copy template trees to disk."""

    encoding: str = "utf-8"
    suffix: str = TEMPLATE_SUFFIX

    def render_string(self, template: str, context: Mapping[str, str]) -> str:
        """Render ``template`` using ``context``.

        Every placeholder must name a key present in ``context``; otherwise
        :class:`TemplateError` is raised. Keys mapped to an empty string are
        substituted with the empty string.
        """

        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            if key not in context:
                raise TemplateError(key)
            return str(context[key])

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def render_file(
        self,
        template_path: str | Path,
        context: Mapping[str, str],
        *,
        target: str | Path | None = None,
    ) -> str:
        """Render ``template_path`` and optionally write the result to ``target``."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        text = template_path.read_bytes().decode(self.encoding)
        rendered = self.render_string(text, context)

        if target is not None:
            Path(target).write_text(rendered, encoding=self.encoding, newline="")

        return rendered

    def instantiate(
        self,
        template_root: str | Path,
        output_root: str | Path,
        context: Mapping[str, str],
    ) -> None:
        """Mirror ``template_root`` into ``output_root``.

        Directories are created before their children, which are visited in
        sorted name order. Files ending in :attr:`suffix` are rendered and
        written without the suffix; every other file is copied byte for byte.
        Existing output files are overwritten. The first unresolved
        placeholder aborts the walk and leaves whatever was already written.
        """

        template_root = Path(template_root)
        if not template_root.exists():
            raise FileNotFoundError(template_root)

        self._walk(template_root, Path(output_root), context, Path("."))

    def _walk(
        self,
        template_root: Path,
        output_root: Path,
        context: Mapping[str, str],
        relative: Path,
    ) -> None:
        source = template_root / relative
        destination = output_root / relative

        if source.is_dir():
            LOGGER.debug("mkdir %s", destination)
            # exist_ok only tolerates an existing directory
            destination.mkdir(parents=True, exist_ok=True)
            for entry in sorted(source.iterdir(), key=lambda path: path.name):
                self._walk(template_root, output_root, context, relative / entry.name)
            return

        if source.name.endswith(self.suffix):
            destination = destination.with_name(source.name[: -len(self.suffix)])
            LOGGER.debug("render %s -> %s", source, destination)
            self.render_file(source, context, target=destination)
            return

        LOGGER.debug("copy %s -> %s", source, destination)
        shutil.copyfile(source, destination)


def instantiate(
    template_root: str | Path,
    output_root: str | Path,
    context: Mapping[str, str],
) -> None:
    """Instantiate ``template_root`` into ``output_root`` with a default renderer."""

    TemplateRenderer().instantiate(template_root, output_root, context)
