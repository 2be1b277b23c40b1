# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Minimal Contentful Management API client for reading content types."""

from __future__ import annotations

from typing import Any

import requests
from pydantic import ValidationError

from contentful_typegen.model.schema import ContentTypeRecord

# ###############
# Public Interface
# ###############

DEFAULT_BASE_URL = "https://api.contentful.com"


class ContentfulError(Exception):
    """Raised when content types cannot be fetched from the Management API."""


class ContentfulClient:
    """Read-only access to the content model of a Contentful environment.

    Args:
        management_token: A Content Management API access token.
        base_url: API root, overridable for proxies and tests.
        timeout: Per-request timeout in seconds.
        page_size: Number of content types requested per page (max 1000).
        session: Optional pre-configured session; a new one is created otherwise.
    """

    def __init__(
        self,
        management_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
        page_size: int = 100,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.page_size = page_size
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {management_token}",
                "Content-Type": _CMA_CONTENT_TYPE,
                "Accept": "application/json",
            }
        )

    def fetch_content_types(self, space_id: str, environment_id: str) -> list[ContentTypeRecord]:
        """Fetch every content type of an environment, in server order.

        Follows ``skip``/``limit`` pagination until ``total`` items are read.

        Raises:
            ContentfulError: On network errors, non-success responses, or
                payloads that are not a content type collection.
        """
        url = f"{self.base_url}/spaces/{space_id}/environments/{environment_id}/content_types"
        records: list[ContentTypeRecord] = []
        skip = 0
        while True:
            page = self._get_json(url, {"skip": skip, "limit": self.page_size})
            items = page.get("items")
            if not isinstance(items, list):
                raise ContentfulError(f"Unexpected response from {url}: missing 'items' list")
            try:
                records.extend(ContentTypeRecord.model_validate(item) for item in items)
            except ValidationError as exc:
                raise ContentfulError(f"Invalid content type in response from {url}: {exc}") from exc

            skip += len(items)
            total = page.get("total")
            if not items or not isinstance(total, int) or skip >= total:
                return records

    def close(self) -> None:
        self.session.close()

    def _get_json(self, url: str, params: dict[str, Any]) -> dict[str, Any]:
        return _parse_json(_send(self.session, url, params, self.timeout), url)


# ################
# Implementation
# ################

_CMA_CONTENT_TYPE = "application/vnd.contentful.management.v1+json"


def _error_message(response: requests.Response) -> str:
    """Extract the API's error message from a failed response, if any."""
    try:
        body = response.json()
    except ValueError:
        return response.reason or ""
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return response.reason or ""


def _send(session: requests.Session, url: str, params: dict[str, Any], timeout: float) -> requests.Response:
    """Issue a GET request, translating transport failures into ContentfulError."""
    try:
        return session.get(url, params=params, timeout=timeout)
    except requests.Timeout as exc:
        raise ContentfulError(f"Request timed out: GET {url}") from exc
    except requests.RequestException as exc:
        raise ContentfulError(f"Request failed: GET {url}: {exc}") from exc


def _parse_json(response: requests.Response, url: str) -> dict[str, Any]:
    if not response.ok:
        raise ContentfulError(f"GET {url} returned HTTP {response.status_code}: {_error_message(response)}")
    try:
        body = response.json()
    except ValueError as exc:
        raise ContentfulError(f"GET {url} returned a non-JSON body") from exc
    if not isinstance(body, dict):
        raise ContentfulError(f"GET {url} returned an unexpected payload")
    return body

