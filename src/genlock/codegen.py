"""Generated-file descriptors and the generator plugin registry.

This is the thin slice of a code-generation pipeline that the ledger plugs
into:

- :class:`SectionTemplate`: one named chunk of a file, rendered with
  :meth:`str.format_map`.
- :func:`header`          : the standard "generated, do not edit" banner.
- :class:`GeneratedFile`  : a file to be written.  ``finalize_func`` is the
  completion hook slot; :meth:`GeneratedFile.render` calls it once the bytes
  are on disk.
- Plugin registry         : generators registered per command, with a
  separate "last" tier that runs after every other generator.

Usage::

    from genlock.codegen import GeneratedFile, header, run_plugins

    files = [GeneratedFile("pkg/models.py", [header("Models", "pkg")])]
    files = run_plugins("gen", "pkg", [], files)
    for f in files:
        f.render("build")
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

# =============================================================================
# TYPE ALIASES
# =============================================================================

# Completion hook: receives the path the file was actually written to.
FinalizeFunc = Callable[[str], None]

# A generator receives (genpkg, roots, files) and returns the new file list.
GenerateFunc = Callable[[str, Sequence[Any], list["GeneratedFile"]], list["GeneratedFile"]]


# =============================================================================
# TEMPLATES
# =============================================================================


@dataclass(frozen=True)
class SectionTemplate:
    """One section of a generated file.

    Attributes:
        name:   Section identifier, e.g. ``"header"``.
        source: Template text using ``{placeholder}`` fields.
        data:   Values substituted into *source*.
    """

    name: str
    source: str
    data: Mapping[str, Any] = field(default_factory=dict)

    def render(self) -> str:
        """Return the section text with *data* substituted."""
        return self.source.format_map(dict(self.data))


_HEADER_SOURCE = (
    "# Code generated by genlock, DO NOT EDIT.\n"
    "#\n"
    "# {title}\n"
    "#\n"
    "# package: {package}\n"
    "{imports}\n"
)


def header(title: str, package: str, imports: Sequence[str] | None = None) -> SectionTemplate:
    """Build the banner section placed at the top of every generated file.

    Args:
        title:   One-line description of the file.
        package: Package the file belongs to.
        imports: Optional import lines emitted after the banner.
    """
    import_lines = "".join(f"import {name}\n" for name in imports or ())
    return SectionTemplate(
        name="header",
        source=_HEADER_SOURCE,
        data={"title": title, "package": package, "imports": import_lines},
    )


# =============================================================================
# GENERATED FILES
# =============================================================================


class GeneratedFile:
    """A file produced by a generation pass.

    ``path`` is the declared destination and cannot be reassigned.
    ``finalize_func`` is a mutable slot for a single completion hook.
    """

    def __init__(
        self,
        path: str,
        section_templates: Sequence[SectionTemplate] = (),
        finalize_func: FinalizeFunc | None = None,
    ) -> None:
        self._path = path
        self.section_templates = list(section_templates)
        self.finalize_func = finalize_func

    def __repr__(self) -> str:
        return f"GeneratedFile(path={self._path!r}, sections={len(self.section_templates)})"

    @property
    def path(self) -> str:
        """Declared destination path."""
        return self._path

    def content(self) -> str:
        """Concatenate the rendered sections."""
        return "".join(section.render() for section in self.section_templates)

    def render(self, output_dir: str | os.PathLike[str]) -> str:
        """Write the file under *output_dir* and fire the completion hook.

        The declared path is joined below *output_dir* even when it is
        absolute, so ``render("/tmp")`` of ``/tmp/x.py`` writes
        ``/tmp/tmp/x.py``.

        Returns:
            The path the file was written to.

        Raises:
            OSError: If the file cannot be written.
            Exception: Whatever ``finalize_func`` raises, unchanged.
        """
        target = os.path.join(os.fspath(output_dir), self._path.lstrip("/" + os.sep))
        parent = os.path.dirname(target)
        if parent:
            os.makedirs(parent, exist_ok=True)

        with open(target, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(self.content())

        logger.debug("codegen: wrote %s", target)

        if self.finalize_func is not None:
            self.finalize_func(target)
        return target


# =============================================================================
# PLUGIN REGISTRY
# =============================================================================


@dataclass(frozen=True)
class Plugin:
    """A registered generator.

    Attributes:
        name:     Unique plugin name.
        cmd:      Command the plugin runs for, e.g. ``"gen"``.
        generate: The generator function.
        last:     Whether the plugin runs after all non-last plugins.
    """

    name: str
    cmd: str
    generate: GenerateFunc
    last: bool = False


_plugins: list[Plugin] = []


def register_plugin(name: str, cmd: str, generate: GenerateFunc) -> None:
    """Register *generate* to run for *cmd* in registration order.

    Raises:
        ValueError: If a plugin named *name* is already registered.
    """
    _register(Plugin(name=name, cmd=cmd, generate=generate))


def register_plugin_last(name: str, cmd: str, generate: GenerateFunc) -> None:
    """Register *generate* to run for *cmd* after every non-last plugin."""
    _register(Plugin(name=name, cmd=cmd, generate=generate, last=True))


def unregister_plugin(name: str) -> None:
    """Remove the plugin named *name*; unknown names are ignored."""
    _plugins[:] = [p for p in _plugins if p.name != name]


def registered_plugins(cmd: str) -> list[Plugin]:
    """Return the plugins for *cmd* in execution order."""
    matching = [p for p in _plugins if p.cmd == cmd]
    return [p for p in matching if not p.last] + [p for p in matching if p.last]


def run_plugins(
    cmd: str,
    genpkg: str,
    roots: Sequence[Any],
    files: list[GeneratedFile],
) -> list[GeneratedFile]:
    """Run every plugin registered for *cmd*, threading the file list through.

    The first plugin error stops the run and propagates.
    """
    for plugin in registered_plugins(cmd):
        logger.debug("codegen: running plugin %r for %r", plugin.name, cmd)
        files = plugin.generate(genpkg, roots, files)
    return files


def _register(plugin: Plugin) -> None:
    if any(p.name == plugin.name for p in _plugins):
        raise ValueError(f"plugin {plugin.name!r} is already registered")
    _plugins.append(plugin)
