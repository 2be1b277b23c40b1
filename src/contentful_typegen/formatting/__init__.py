# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Best-effort formatting of generated declaration files."""

from contentful_typegen.formatting.prettier import PRETTIER_COMMAND, FormatterError, format_typescript

__all__ = [
    "PRETTIER_COMMAND",
    "FormatterError",
    "format_typescript",
]
