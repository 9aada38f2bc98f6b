"""Target deployment checks run before anything is created."""

from __future__ import annotations

import logging

from packaging.version import InvalidVersion, Version

from project_migrator.contracts.exceptions import ConfigError
from project_migrator.contracts.provider import ProjectProvider
from project_migrator.contracts.remote import ProductInformation

_LOG = logging.getLogger(__name__)

# Releases up to and including this one lack the Projects mutations an import needs.
NEWEST_UNSUPPORTED_ENTERPRISE_SERVER_VERSION = Version("3.10.0")


def ensure_supported(product: ProductInformation) -> None:
    """Raise ``ConfigError`` for GitHub Enterprise Server releases that cannot receive an import."""
    if not product.is_enterprise_server:
        _LOG.info("Running import in GitHub.com mode")
        return

    raw_version = product.enterprise_server_version or ""
    try:
        version = Version(raw_version)
    except InvalidVersion as exc:
        raise ConfigError(f"GitHub Enterprise Server reported an unrecognised version: {raw_version!r}") from exc

    if version <= NEWEST_UNSUPPORTED_ENTERPRISE_SERVER_VERSION:
        raise ConfigError(
            f"You are trying to import into GitHub Enterprise Server {raw_version}, but only versions newer "
            f"than {NEWEST_UNSUPPORTED_ENTERPRISE_SERVER_VERSION} are supported."
        )
    _LOG.info("Running import in GitHub Enterprise Server %s mode", raw_version)


async def check_deployment(provider: ProjectProvider) -> ProductInformation:
    product = await provider.get_product_information()
    ensure_supported(product)
    return product
