"""Find-or-create orchestration for the Transaction data source.

Runs the lookup and provisioning steps strictly in sequence, since each step
needs the previous step's result:

1. Search for the "Transaction" data source (fast path, checked every call)
2. Search for an existing "InTheGreenYet DB" container left by a partial run
3. Without one, pick a parent page and create the container
4. Create the data source with the fixed schema
5. Return the new id with ``created=True``

Any failure value short-circuits and is returned to the caller.

Not transactional: two first-time callers racing through steps 1-4 can both
see "not found" and both create a data source. Notion offers no
create-if-absent primitive; integrators needing a guarantee must serialize
calls per workspace themselves.
"""

import logging

import httpx

from inthegreen_proxy.notion.locator import find_parent_container, search_named
from inthegreen_proxy.notion.models import (
    NotionFailure,
    ProvisionResult,
    SearchResult,
    SetupResult,
    TransportFailure,
)
from inthegreen_proxy.notion.provisioner import create_container, create_typed_resource
from inthegreen_proxy.notion.schema import (
    DATABASE_NAME,
    DATASOURCE_NAME,
    PAGE_NAME,
    TRANSACTION_SCHEMA,
)

logger = logging.getLogger(__name__)


async def _resolve_container(token: str) -> str | NotionFailure:
    """Reuse an existing container database or create one under a parent page."""
    existing = await search_named(token, DATABASE_NAME)
    if isinstance(existing, NotionFailure):
        return existing
    if isinstance(existing, SearchResult):
        container_id = existing.database_id or existing.id
        logger.info("Reusing existing database %s", container_id)
        return container_id

    parent_id = await find_parent_container(token, PAGE_NAME)
    if isinstance(parent_id, NotionFailure):
        return parent_id

    container_id = await create_container(token, parent_id, DATABASE_NAME)
    if isinstance(container_id, NotionFailure):
        return container_id
    logger.info("Created database %s under page %s", container_id, parent_id)
    return container_id


async def provision(token: str) -> ProvisionResult | NotionFailure:
    """Steps 2-4: resolve or create the container, then create the data source."""
    container_id = await _resolve_container(token)
    if isinstance(container_id, NotionFailure):
        return container_id

    resource_id = await create_typed_resource(
        token, container_id, DATASOURCE_NAME, TRANSACTION_SCHEMA
    )
    if isinstance(resource_id, NotionFailure):
        return resource_id

    logger.info("Created data source %s in database %s", resource_id, container_id)
    return ProvisionResult(container_id=container_id, resource_id=resource_id)


async def _ensure(token: str) -> SetupResult | NotionFailure:
    found = await search_named(token, DATASOURCE_NAME)
    if isinstance(found, NotionFailure):
        return found
    if found is not None:
        return SetupResult(resource_id=found.id, created=False)

    provisioned = await provision(token)
    if isinstance(provisioned, NotionFailure):
        return provisioned
    return SetupResult(
        resource_id=provisioned.resource_id,
        created=True,
        container_id=provisioned.container_id,
    )


async def ensure_resource(token: str) -> SetupResult | NotionFailure:
    """Find or create the Transaction data source for the token's workspace.

    Network errors are converted to ``TransportFailure``; only malformed
    responses from Notion raise.
    """
    try:
        return await _ensure(token)
    except httpx.HTTPError as exc:
        logger.error("Notion request failed during setup: %s", exc)
        return TransportFailure(message=f"Notion request failed: {exc.__class__.__name__}")
