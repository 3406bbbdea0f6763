"""Creation of the database container and the typed Transaction data source.

Neither call is idempotent: calling ``create_typed_resource`` twice creates two
data sources. Idempotency belongs to ``ensure_resource`` in setup.py.
"""

import logging
from collections.abc import Mapping

from inthegreen_proxy.notion.client import notion_request
from inthegreen_proxy.notion.models import ProvisionFailed
from inthegreen_proxy.notion.schema import rich_text_title

logger = logging.getLogger(__name__)


async def _create(token: str, path: str, body: dict, what: str) -> str | ProvisionFailed:
    response = await notion_request(path, token, method="POST", body=body)
    if not response.is_success:
        # Notion explains schema/validation problems in the body, keep it whole
        err_body = response.text
        logger.error("Failed to create %s: %s %s", what, response.status_code, err_body)
        return ProvisionFailed(
            message=f"Failed to create {what}: {response.status_code} {err_body}",
            status=response.status_code,
            body=err_body,
        )
    return response.json()["id"]


async def create_container(token: str, parent_id: str, title: str) -> str | ProvisionFailed:
    """Create an empty database under the page ``parent_id``."""
    return await _create(
        token,
        "/databases",
        {
            "parent": {"type": "page_id", "page_id": parent_id},
            "title": rich_text_title(title),
        },
        "database",
    )


async def create_typed_resource(
    token: str, container_id: str, title: str, schema: Mapping[str, dict]
) -> str | ProvisionFailed:
    """Create a data source with the full ``schema`` under database ``container_id``.

    The schema is sent in a single request, so it is either applied whole or
    the call fails.
    """
    return await _create(
        token,
        "/data_sources",
        {
            "parent": {"type": "database_id", "database_id": container_id},
            "title": rich_text_title(title),
            "properties": dict(schema),
        },
        "data source",
    )
