# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Access to the remote content model."""

from contentful_typegen.remote.cma_client import DEFAULT_BASE_URL, ContentfulClient, ContentfulError

__all__ = [
    "DEFAULT_BASE_URL",
    "ContentfulClient",
    "ContentfulError",
]
