# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Formatting of generated TypeScript through the Prettier executable."""

import subprocess
from collections.abc import Sequence
from pathlib import Path

# ###############
# Public Interface
# ###############

PRETTIER_COMMAND: tuple[str, ...] = ("npx", "--no-install", "prettier")


class FormatterError(Exception):
    """Raised when Prettier is unavailable or fails to format the input."""


def format_typescript(
    text: str,
    out_file: Path,
    *,
    command: Sequence[str] = PRETTIER_COMMAND,
    timeout: int = 60,
) -> str:
    """Format TypeScript *text* with Prettier and return the result.

    Prettier picks its parser from *out_file* (``--stdin-filepath``) and
    resolves the project configuration relative to that path, so the output
    matches what ``prettier --write`` would produce for the file.

    Args:
        text: Source text to format.
        out_file: The path the text will be written to.
        command: Command prefix that invokes Prettier.
        timeout: Seconds to wait before giving up.

    Returns:
        The formatted text.

    Raises:
        FormatterError: If the executable is missing or cannot be run, times
            out, exits with a non-zero code or writes no usable output.
    """
    args = [*command, "--stdin-filepath", str(out_file)]
    try:
        result = subprocess.run(
            args,
            input=text,
            capture_output=True,
            text=True,
            encoding="utf-8",
            timeout=timeout,
        )
    except FileNotFoundError as exc:
        raise FormatterError(f"{command[0]} executable not found on PATH") from exc
    except subprocess.TimeoutExpired as exc:
        raise FormatterError(f"Formatter timed out: {' '.join(args)}") from exc
    except (OSError, subprocess.SubprocessError) as exc:
        raise FormatterError(f"Cannot run formatter: {exc}") from exc
    except UnicodeError as exc:
        raise FormatterError(f"Formatter output is not valid UTF-8: {exc}") from exc

    if result.returncode != 0:
        raise FormatterError(f"{' '.join(args)}: {result.stderr.strip()}")
    if not result.stdout.strip():
        raise FormatterError(f"{' '.join(args)}: produced no output")
    return result.stdout
