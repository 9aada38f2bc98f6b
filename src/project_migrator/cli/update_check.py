"""Best-effort check for a newer published release."""

from __future__ import annotations

import logging

import httpx
from packaging.version import InvalidVersion, Version

_LOG = logging.getLogger(__name__)

PYPI_URL = "https://pypi.org/pypi/project-migrator/json"


def is_newer(latest: str, current: str) -> bool:
    """PEP 440 comparison; unparseable versions never count as newer."""
    try:
        return Version(latest) > Version(current)
    except InvalidVersion:
        _LOG.debug("Cannot compare versions %r and %r", latest, current)
        return False


async def check_for_update(
    current_version: str,
    *,
    proxy_url: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str | None:
    """Return the latest version if it is newer than *current_version*.

    Never raises: any failure is logged at debug and treated as "no update".
    """
    try:
        if transport is not None:
            client = httpx.AsyncClient(transport=transport, timeout=5.0)
        else:
            client = httpx.AsyncClient(proxy=proxy_url, timeout=5.0)
        async with client:
            response = await client.get(PYPI_URL)
            response.raise_for_status()
            latest = response.json()["info"]["version"]
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
        _LOG.debug("Update check failed: %s", exc)
        return None

    if not isinstance(latest, str) or not is_newer(latest, current_version):
        return None
    return latest
