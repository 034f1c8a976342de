"""Project scaffolding helpers."""

from __future__ import annotations

import errno
import logging
import os
import shutil
from pathlib import Path

from . import templates
from .config import ProjectConfig, ProjectTemplate
from .errors import IoFailure, ProjectAlreadyExists
from .template import render_string

__all__ = ["ProjectScaffolder", "create_project"]


LOGGER = logging.getLogger(__name__)


def _invalid_path(path: Path, exc: ValueError) -> OSError:
    # pathlib reports unusable paths (embedded NUL) as ValueError.
    return OSError(errno.EINVAL, f"invalid path: {exc}", str(path))


def _make_directory(path: Path, *, parents: bool = False) -> None:
    try:
        path.mkdir(parents=parents)
    except ValueError as exc:
        raise _invalid_path(path, exc) from exc
    LOGGER.debug("created directory %s", path)


def _write_file(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except ValueError as exc:
        raise _invalid_path(path, exc) from exc
    LOGGER.debug("wrote %s", path)


class ProjectScaffolder:
    """Create a Godot project paired with a Rust GDExtension crate.

    The project directory is created from scratch. If anything fails after it
    has been created, the whole directory is removed again so callers never
    observe a half-written project.
    """

    def create(self, config: ProjectConfig) -> Path:
        """Create the project described by ``config`` and return its path."""

        project_path = config.project_path()
        if os.path.lexists(project_path):
            raise ProjectAlreadyExists(project_path)

        created = False
        try:
            _make_directory(project_path)
            created = True
            self._create_directory_structure(project_path)
            self._write_template_files(project_path, config.template)
            self._write_project_descriptor(project_path, config)
            if config.template is ProjectTemplate.PROTO:
                self._create_proto_directories(project_path)
            self._write_native_sources(project_path)
        except OSError as exc:
            if created:
                self._rollback(project_path)
            raise IoFailure(exc) from exc
        except Exception:
            if created:
                self._rollback(project_path)
            raise

        LOGGER.info("created %s project at %s", config.template.value, project_path)
        return project_path

    def _create_directory_structure(self, project_path: Path) -> None:
        _make_directory(project_path / templates.ENGINE_DIR)
        _make_directory(project_path / templates.NATIVE_DIR)
        _make_directory(project_path / templates.NATIVE_DIR / "src")

    def _write_template_files(self, project_path: Path, template: ProjectTemplate) -> None:
        engine_dir = project_path / templates.ENGINE_DIR
        files = [
            (project_path / ".gitignore", templates.PROJECT_GITIGNORE),
            (engine_dir / ".gitignore", templates.GODOT_GITIGNORE),
            (engine_dir / templates.extension_manifest_name(template), templates.GODOT_GDEXTENSION),
            (project_path / templates.NATIVE_DIR / ".gitignore", templates.RUST_GITIGNORE),
        ]
        for destination, content in files:
            _write_file(destination, content)

    def _write_project_descriptor(self, project_path: Path, config: ProjectConfig) -> None:
        rendered = render_string(templates.PROJECT_DESCRIPTOR_TEMPLATE, config.context())
        _write_file(project_path / templates.ENGINE_DIR / "project.godot", rendered)

    def _create_proto_directories(self, project_path: Path) -> None:
        engine_dir = project_path / templates.ENGINE_DIR
        for relative in templates.PROTO_DIRECTORIES:
            _make_directory(engine_dir / relative, parents=True)

    def _write_native_sources(self, project_path: Path) -> None:
        native_dir = project_path / templates.NATIVE_DIR
        _write_file(native_dir / "src" / "lib.rs", templates.LIB_RS)
        _write_file(native_dir / "Cargo.toml", templates.CARGO_TOML)

    def _rollback(self, project_path: Path) -> None:
        LOGGER.warning("project creation failed, removing %s", project_path)
        try:
            shutil.rmtree(project_path)
        except OSError:
            LOGGER.exception("could not remove %s", project_path)


def create_project(config: ProjectConfig) -> None:
    """Create the project described by ``config``.

    Raises
    ------
    ProjectAlreadyExists
        When ``config.project_path()`` is already occupied. Nothing is touched.
    IoFailure
        When a filesystem operation fails. The partially created project
        directory is removed before the error is raised.
    """

    ProjectScaffolder().create(config)
