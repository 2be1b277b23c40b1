# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the contentful-typegen command-line interface."""

import argparse
import os
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from contentful_typegen.config import (
    DEFAULT_OUT_FILE,
    ENV_ENVIRONMENT_ID,
    ENV_MANAGEMENT_TOKEN,
    ENV_SPACE_ID,
    PROJECT_FILE_NAME,
    CliOverrides,
    ProjectFile,
    TypegenConfigError,
    load_project_file,
    resolve_config,
)
from contentful_typegen.generate import GenerationError, generate_contentful_types
from contentful_typegen.remote.cma_client import ContentfulError

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the contentful-typegen CLI."""
    parser = argparse.ArgumentParser(
        prog="contentful-typegen",
        description="Generate TypeScript declarations from a Contentful content model.",
    )
    parser.add_argument("--space", dest="space_id", help=f"Contentful space id (or {ENV_SPACE_ID})")
    parser.add_argument("--env", dest="environment_id", help=f"Environment id (or {ENV_ENVIRONMENT_ID})")
    parser.add_argument(
        "--token",
        dest="management_token",
        help=f"Content Management API token (or {ENV_MANAGEMENT_TOKEN})",
    )
    parser.add_argument("--out", dest="out_file", help=f"Output file path (default: {DEFAULT_OUT_FILE})")
    parser.add_argument("--prefix", help="Prefix for generated type names (default: I)")
    parser.add_argument(
        "--config",
        type=Path,
        help=f"Project config file (default: ./{PROJECT_FILE_NAME} if present)",
    )

    # Rendering toggles. None means "not given" so the project file can decide.
    toggles = parser.add_argument_group("rendering")
    toggles.add_argument(
        "--no-undefined-optionals",
        dest="include_undefined_on_optional",
        action="store_const",
        const=False,
        help="Do not add '| undefined' to optional properties",
    )
    toggles.add_argument(
        "--readonly-arrays",
        dest="arrays_readonly",
        action="store_const",
        const=True,
        help="Use ReadonlyArray<T> instead of T[]",
    )
    toggles.add_argument(
        "--no-aliases",
        dest="prefer_linked_aliases",
        action="store_const",
        const=False,
        help="Use Entry<IThingFields> instead of IThing for entry links",
    )
    toggles.add_argument(
        "--no-brand",
        dest="brand_content_type_id",
        action="store_const",
        const=False,
        help="Do not brand entries with their content type id",
    )
    toggles.add_argument(
        "--no-format",
        dest="format_output",
        action="store_const",
        const=False,
        help="Write the output without running Prettier",
    )

    args = parser.parse_args()
    sys.exit(_run(args))


# ################
# Implementation
# ################


def _run(args: argparse.Namespace) -> int:
    """Resolve the configuration and run the generator."""
    load_dotenv(find_dotenv(usecwd=True))

    try:
        project = _load_project(args.config)
        config = resolve_config(
            CliOverrides(
                space_id=args.space_id,
                environment_id=args.environment_id,
                management_token=args.management_token,
                out_file=args.out_file,
                prefix=args.prefix,
                include_undefined_on_optional=args.include_undefined_on_optional,
                arrays_readonly=args.arrays_readonly,
                prefer_linked_aliases=args.prefer_linked_aliases,
                brand_content_type_id=args.brand_content_type_id,
                format_output=args.format_output,
            ),
            os.environ,
            project,
        )
    except TypegenConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        result = generate_contentful_types(config)
    except (ContentfulError, GenerationError) as exc:
        print("Error: contentful-typegen failed", file=sys.stderr)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print("Error: contentful-typegen failed", file=sys.stderr)
        print(f"Error: unexpected {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    if result.format_error is not None:
        print(f"Warning: output was not formatted: {result.format_error}")
    print(f"Generated {result.count} type(s) -> {result.out_file}")
    return 0


def _load_project(path: Path | None) -> ProjectFile | None:
    """Load the explicit project file, or the default one when it exists."""
    if path is not None:
        return load_project_file(path)
    default = Path.cwd() / PROJECT_FILE_NAME
    if default.exists():
        return load_project_file(default)
    return None
