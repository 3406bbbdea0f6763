"""Notion workspace lookup and Transaction data source provisioning."""

from inthegreen_proxy.notion.client import notion_request
from inthegreen_proxy.notion.locator import find_parent_container, search_named
from inthegreen_proxy.notion.models import (
    LookupFailed,
    NoAccessibleParent,
    NotionFailure,
    ParentCandidate,
    ProvisionFailed,
    ProvisionResult,
    SearchResult,
    SetupResult,
    TransportFailure,
)
from inthegreen_proxy.notion.provisioner import create_container, create_typed_resource
from inthegreen_proxy.notion.schema import TRANSACTION_SCHEMA
from inthegreen_proxy.notion.setup import ensure_resource

__all__ = [
    "create_container",
    "create_typed_resource",
    "ensure_resource",
    "find_parent_container",
    "LookupFailed",
    "NoAccessibleParent",
    "notion_request",
    "NotionFailure",
    "ParentCandidate",
    "ProvisionFailed",
    "ProvisionResult",
    "search_named",
    "SearchResult",
    "SetupResult",
    "TRANSACTION_SCHEMA",
    "TransportFailure",
]
