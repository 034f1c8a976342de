"""Configuration helpers shared by the project scaffolder and CLI."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["ProjectConfig", "ProjectTemplate"]


def _default_base_path() -> Path:
    try:
        return Path.cwd()
    except OSError:
        return Path(".")


class ProjectTemplate(str, Enum):
    """Directory skeleton variants understood by the scaffolder."""

    BASIC = "basic"
    PROTO = "proto"


class ProjectConfig(BaseModel):
    """Description of the project to create.

    Attributes
    ----------
    name:
        The project name provided by the user. It is preserved verbatim and is
        used both as the project directory name and inside the generated Godot
        project descriptor.
    base_path:
        Directory in which the project directory is created.
    template:
        The :class:`ProjectTemplate` variant to generate.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Project name, used as a single path segment.")
    base_path: Path = Field(default_factory=_default_base_path, description="Parent directory of the project.")
    template: ProjectTemplate = Field(default=ProjectTemplate.BASIC, description="Scaffold variant.")

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be empty")
        if "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError(f"project name must be a single path segment, got {value!r}")
        return value

    @classmethod
    def new(cls, name: str) -> "ProjectConfig":
        """Build a config for ``name`` rooted at the current directory."""

        return cls(name=name)

    def with_base_path(self, path: str | Path) -> "ProjectConfig":
        return self.model_copy(update={"base_path": Path(path)})

    def with_template(self, template: ProjectTemplate | str) -> "ProjectConfig":
        return self.model_copy(update={"template": ProjectTemplate(template)})

    def project_path(self) -> Path:
        """Return ``base_path / name`` without any normalisation."""

        return self.base_path / self.name

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "template": self.template.value,
        }
