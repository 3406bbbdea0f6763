"""Result and failure types for Notion lookup and provisioning.

Each step returns either its value or one of the failure models below; the
setup router is the only place these are turned into HTTP errors.
"""

from pydantic import BaseModel


class SearchResult(BaseModel):
    """A data source whose title exactly matched a search query."""

    id: str
    title: str
    database_id: str | None = None  # Parent database, when reported


class ParentCandidate(BaseModel):
    """A page visible to the integration, with its title flattened to text."""

    id: str
    title_text: str


class ProvisionResult(BaseModel):
    """Database container and typed data source created by provisioning."""

    container_id: str
    resource_id: str


class SetupResult(BaseModel):
    """Outcome of find-or-create: the durable data source id."""

    resource_id: str
    created: bool
    container_id: str | None = None  # Only known when provisioning ran


class NotionFailure(BaseModel):
    """Base for failure values returned by Notion operations."""

    message: str
    status: int | None = None


class LookupFailed(NotionFailure):
    """A search request returned a non-2xx status."""


class NoAccessibleParent(NotionFailure):
    """The integration has not been shared any page to create a database under."""


class ProvisionFailed(NotionFailure):
    """A create request was rejected; ``body`` is Notion's error payload verbatim."""

    body: str = ""


class TransportFailure(NotionFailure):
    """The request never produced a response (connection error, timeout)."""
