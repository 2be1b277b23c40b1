# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""End-to-end generation: fetch the content model, build, format and write.

The steps run strictly in sequence.  Fetch and write failures abort the run;
a formatting failure does not, and the unformatted declarations are written
instead.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from contentful_typegen.compiler.declarations import create_file
from contentful_typegen.config import TypegenConfig
from contentful_typegen.formatting.prettier import FormatterError, format_typescript
from contentful_typegen.remote.cma_client import ContentfulClient

# ###############
# Public Interface
# ###############


class GenerationError(Exception):
    """Raised when the generated declarations cannot be written."""


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a successful run.

    Attributes:
        count: Number of content types rendered.
        out_file: Path the declarations were written to.
        formatted: Whether the written text went through the formatter.
        format_error: Why formatting was skipped, when it failed.
    """

    count: int
    out_file: Path
    formatted: bool
    format_error: str | None = None


def generate_contentful_types(
    config: TypegenConfig,
    *,
    client: ContentfulClient | None = None,
    formatter: Callable[[str, Path], str] = format_typescript,
) -> GenerationResult:
    """Generate the declaration file described by *config*.

    Args:
        config: The resolved run configuration.
        client: Management API client; one is created from the configured
            token when omitted and closed after the fetch.
        formatter: Called with the raw text and the output path; may raise
            :class:`FormatterError`.

    Returns:
        The number of content types and where they were written.

    Raises:
        ContentfulError: If the content model cannot be fetched.
        GenerationError: If the output file cannot be written.
    """
    owns_client = client is None
    if client is None:
        client = ContentfulClient(config.management_token)
    try:
        content_types = client.fetch_content_types(config.space_id, config.environment_id)
    finally:
        if owns_client:
            client.close()

    output = create_file(content_types, config.render_options)

    formatted = False
    format_error = None
    if config.format_output:
        try:
            output = formatter(output, config.out_file)
            formatted = True
        except FormatterError as exc:
            format_error = str(exc)

    _write_output(output, config.out_file)
    return GenerationResult(
        count=len(content_types),
        out_file=config.out_file,
        formatted=formatted,
        format_error=format_error,
    )


# ################
# Implementation
# ################


def _write_output(text: str, path: Path) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Cannot write '{path}': {exc}") from exc
