"""Scaffold Godot projects backed by a Rust GDExtension crate.

The package exposes the :class:`ProjectConfig` describing a project, the
:class:`ProjectScaffolder` that writes it to disk with rollback on failure, and
the error types reported when that fails. The same operation is available on
the command line as ``create-godotrs``.
"""

from __future__ import annotations

from .config import ProjectConfig, ProjectTemplate
from .errors import CreateError, IoFailure, ProjectAlreadyExists
from .scaffold import ProjectScaffolder, create_project
from .template import TemplateRenderingError, render_string

__all__ = [
    "CreateError",
    "IoFailure",
    "ProjectAlreadyExists",
    "ProjectConfig",
    "ProjectScaffolder",
    "ProjectTemplate",
    "TemplateRenderingError",
    "create_project",
    "render_string",
]

__version__ = "0.1.0"
