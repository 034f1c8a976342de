"""Command line interface for create-godotrs."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from .config import ProjectConfig, ProjectTemplate
from .errors import CreateError
from .scaffold import ProjectScaffolder


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-godotrs",
        description="Create a new Godot project with Rust",
    )
    parser.add_argument("name", help="Name of the project to create")
    parser.add_argument(
        "--template",
        choices=[template.value for template in ProjectTemplate],
        default=ProjectTemplate.BASIC.value,
        help="Scaffold template",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory in which the project is created (defaults to the current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _build_config(args: argparse.Namespace) -> ProjectConfig:
    config = ProjectConfig.new(args.name).with_template(args.template)
    if args.directory is not None:
        config = config.with_base_path(args.directory)
    return config


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = _build_config(args)
    except ValidationError as exc:
        message = exc.errors()[0]["msg"]
        print(f"Error creating project: {message}", file=sys.stderr)
        return 1

    try:
        project_path = ProjectScaffolder().create(config)
    except CreateError as exc:
        print(f"Error creating project: {exc}", file=sys.stderr)
        return 1

    print(f"Successfully created project: {config.name}")
    print(f"Project location: {project_path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
