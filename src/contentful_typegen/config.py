# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run configuration: the project file, environment variables and their precedence.

A run is configured once, at process start, into a :class:`TypegenConfig`
that is passed down explicitly.  Values are taken, in order of precedence,
from command-line flags, environment variables (for the three credentials),
the optional ``.contentful-typegen.yaml`` project file, and built-in
defaults.  The management token is never read from the project file.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from contentful_typegen.model.options import RenderOptions

# ###############
# Public Interface
# ###############

PROJECT_FILE_NAME = ".contentful-typegen.yaml"
DEFAULT_OUT_FILE = "types/contentful.d.ts"

ENV_SPACE_ID = "CF_SPACE_ID"
ENV_ENVIRONMENT_ID = "CF_ENV"
ENV_MANAGEMENT_TOKEN = "CF_MANAGER_TOKEN"


class TypegenConfigError(Exception):
    """Raised when the configuration is invalid or incomplete."""


class ProjectFile(BaseModel):
    """Settings read from ``.contentful-typegen.yaml``; every key is optional."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    space: str | None = None
    environment: str | None = None
    out: str | None = None
    prefix: str | None = None
    undefined_optionals: bool | None = Field(default=None, alias="undefined-optionals")
    readonly_arrays: bool | None = Field(default=None, alias="readonly-arrays")
    aliases: bool | None = None
    brand: bool | None = None
    format: bool | None = None


@dataclass(frozen=True)
class TypegenConfig:
    """Everything one generation run needs.

    Attributes:
        space_id: Contentful space id.
        environment_id: Contentful environment id.
        management_token: Content Management API token.
        out_file: Destination of the generated ``.d.ts`` file.
        render_options: Options passed to the declaration builder.
        format_output: Whether to run the output through Prettier.
    """

    space_id: str
    environment_id: str
    management_token: str
    out_file: Path = Path(DEFAULT_OUT_FILE)
    render_options: RenderOptions = field(default_factory=RenderOptions)
    format_output: bool = True


@dataclass(frozen=True)
class CliOverrides:
    """Values given on the command line; None means "not given"."""

    space_id: str | None = None
    environment_id: str | None = None
    management_token: str | None = None
    out_file: str | None = None
    prefix: str | None = None
    include_undefined_on_optional: bool | None = None
    arrays_readonly: bool | None = None
    prefer_linked_aliases: bool | None = None
    brand_content_type_id: bool | None = None
    format_output: bool | None = None


def load_project_file(path: Path) -> ProjectFile:
    """Load and validate a project file.

    An empty file is treated as a file without settings.

    Raises:
        TypegenConfigError: If the file cannot be read, is not valid YAML, or
            contains unknown or mistyped keys.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise TypegenConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise TypegenConfigError(f"Cannot read config file: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TypegenConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TypegenConfigError(f"{path}: config must be a YAML mapping")

    try:
        return ProjectFile.model_validate(data)
    except ValidationError as exc:
        raise TypegenConfigError(f"Invalid config file '{path}': {exc}") from exc


def resolve_config(
    overrides: CliOverrides,
    environ: Mapping[str, str],
    project: ProjectFile | None = None,
) -> TypegenConfig:
    """Merge command-line values, environment variables and the project file.

    Raises:
        TypegenConfigError: If the space id, environment id or management
            token cannot be determined.
    """
    project = project if project is not None else ProjectFile()

    space_id = overrides.space_id or environ.get(ENV_SPACE_ID) or project.space
    environment_id = overrides.environment_id or environ.get(ENV_ENVIRONMENT_ID) or project.environment
    management_token = overrides.management_token or environ.get(ENV_MANAGEMENT_TOKEN)

    if not space_id or not environment_id or not management_token:
        raise TypegenConfigError(
            "Missing required inputs. Provide --space, --env, --token or set "
            f"{ENV_SPACE_ID} / {ENV_ENVIRONMENT_ID} / {ENV_MANAGEMENT_TOKEN}."
        )

    defaults = RenderOptions()
    render_options = RenderOptions(
        prefix=_first(overrides.prefix, project.prefix, defaults.prefix),
        include_undefined_on_optional=_first(
            overrides.include_undefined_on_optional,
            project.undefined_optionals,
            defaults.include_undefined_on_optional,
        ),
        arrays_readonly=_first(overrides.arrays_readonly, project.readonly_arrays, defaults.arrays_readonly),
        prefer_linked_aliases=_first(overrides.prefer_linked_aliases, project.aliases, defaults.prefer_linked_aliases),
        brand_content_type_id=_first(overrides.brand_content_type_id, project.brand, defaults.brand_content_type_id),
    )

    return TypegenConfig(
        space_id=space_id,
        environment_id=environment_id,
        management_token=management_token,
        out_file=Path(_first(overrides.out_file, project.out, DEFAULT_OUT_FILE)),
        render_options=render_options,
        format_output=_first(overrides.format_output, project.format, True),
    )


# ################
# Implementation
# ################


def _first(*values: Any) -> Any:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None
