"""
Document loading for résumé data.

Loads profile.json and versions.json concurrently from a local directory or
an http(s) base URL. If either fails, makes one attempt at the legacy
data.json and splits it into the same (profile, version_set) pair.

The loader only decodes JSON; validation and merging happen downstream.
"""

import asyncio
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import httpx
from dotenv import load_dotenv

from versa.contexts.intake.documents import (
    LEGACY_FILENAME,
    PROFILE_FILENAME,
    VERSIONS_FILENAME,
    LoadedDocuments,
    split_legacy_document,
)
from versa.contexts.intake.logger import _log_debug, _log_warning, log_load_result
from versa.contexts.templating.exceptions import DocumentLoadError

load_dotenv()
DATA_PATH = os.getenv("VERSA_DATA_PATH", "data")

# Failures that trigger the legacy fallback
LOAD_ERRORS = (OSError, ValueError, httpx.HTTPError)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def fetch_json(
    source: str,
    filename: str,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """
    Fetch and decode one JSON document.

    Args:
        source: Local directory or http(s) base URL
        filename: Document file name (e.g., "profile.json")
        client: HTTP client, required when source is a URL

    Returns:
        Decoded JSON value

    Raises:
        OSError: Local file missing or unreadable
        httpx.HTTPError: Request failed or returned a non-2xx status
        ValueError: Content is not valid JSON
    """
    if is_url(source):
        url = f"{source.rstrip('/')}/{filename}"
        _log_debug(f"GET {url}")
        response = await client.get(url)
        response.raise_for_status()
        return response.json()

    path = Path(source) / filename
    _log_debug(f"Reading {path}")
    text = await asyncio.to_thread(path.read_text, encoding="utf-8")
    return json.loads(text)


async def load_documents(
    source: Union[str, Path, None] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> LoadedDocuments:
    """
    Load the profile and version-set documents, falling back to legacy data.json.

    Args:
        source: Local directory or http(s) base URL (defaults to VERSA_DATA_PATH)
        transport: Optional httpx transport (e.g., httpx.MockTransport in tests)

    Returns:
        LoadedDocuments with structure "separated" or "legacy"

    Raises:
        DocumentLoadError: If neither layout can be loaded

    Example:
        >>> documents = asyncio.run(load_documents("data"))
        >>> documents.structure
        'separated'
    """
    source = str(source if source is not None else DATA_PATH)

    async with httpx.AsyncClient(transport=transport, follow_redirects=True) as client:
        # Wait for both fetches so none is still running when the client closes
        results = await asyncio.gather(
            fetch_json(source, PROFILE_FILENAME, client),
            fetch_json(source, VERSIONS_FILENAME, client),
            return_exceptions=True,
        )
        try:
            for result in results:
                if isinstance(result, BaseException):
                    raise result
            profile, version_set = results
            documents = LoadedDocuments(
                profile=profile, version_set=version_set, structure="separated", source=source
            )
        except LOAD_ERRORS as e:
            _log_warning(f"Separated documents unavailable ({e}); falling back to {LEGACY_FILENAME}")
            try:
                legacy = await fetch_json(source, LEGACY_FILENAME, client)
                profile, version_set = split_legacy_document(legacy)
            except LOAD_ERRORS as legacy_error:
                raise DocumentLoadError(
                    "Could not load any data files. Please check your data structure.",
                    source=source,
                    original_error=legacy_error,
                ) from legacy_error
            documents = LoadedDocuments(
                profile=profile, version_set=version_set, structure="legacy", source=source
            )

    log_load_result(documents)
    return documents


def load_documents_sync(source: Union[str, Path, None] = None) -> LoadedDocuments:
    """Blocking wrapper around load_documents() for scripts."""
    return asyncio.run(load_documents(source))
