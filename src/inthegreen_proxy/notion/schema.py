"""Canonical names and the fixed Transaction data source schema."""

from types import MappingProxyType

PAGE_NAME = "InTheGreenYet"
DATABASE_NAME = "InTheGreenYet DB"
DATASOURCE_NAME = "Transaction"

CURRENCY_OPTIONS = (
    ("TWD", "green"),
    ("USD", "blue"),
    ("JPY", "red"),
    ("USDT", "yellow"),
    ("USDC", "purple"),
)

TRANSACTION_SCHEMA = MappingProxyType(
    {
        "Title": {"title": {}},
        "Amount": {"number": {"format": "number"}},
        "Fee": {"number": {"format": "number"}},
        "Currency": {
            "select": {
                "options": [{"name": name, "color": color} for name, color in CURRENCY_OPTIONS],
            },
        },
        "Exchange Rate": {"number": {"format": "number"}},
        "From": {"rich_text": {}},
        "To": {"rich_text": {}},
        "Date": {"date": {}},
        "Note": {"rich_text": {}},
    }
)


def title_text(rich_text: list[dict] | None) -> str:
    """Flatten a Notion rich_text array to its plain text."""
    return "".join(part.get("plain_text", "") for part in rich_text or [])


def rich_text_title(content: str) -> list[dict]:
    """Build the title array used when creating databases and data sources."""
    return [{"type": "text", "text": {"content": content}}]
