"""Notion REST API service for exporting a listing as a database page.

Uses httpx for async HTTP requests. Outline blocks from the export formatter
are converted to Notion blocks here; nothing else in the codebase knows the
Notion block schema.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from crafter.core.config import get_settings
from crafter.core.errors import NotFoundError, ServiceError, ValidationError
from crafter.core.export_formatter import build_outline
from crafter.core.logging import get_logger
from crafter.core.pricing_metrics import profitability_status, resolve_target_rate
from crafter.core.schemas_export import ExportBundle, OutlineBlock

logger = get_logger(__name__)

NOTION_API = "https://api.notion.com/v1"

MAX_TEXT_LENGTH = 2000
MAX_CHILDREN_PER_REQUEST = 100


@dataclass
class PublishedPage:
    page_id: str
    url: str


class NotionAPIError(Exception):
    """Non-2xx response from Notion."""

    def __init__(self, status: int, code: str, message: str):
        super().__init__(f"Notion API {status} {code}: {message}")
        self.status = status
        self.code = code
        self.message = message


def split_text_into_chunks(text: str, max_length: int = MAX_TEXT_LENGTH) -> list[str]:
    """
    Split text into pieces of at most ``max_length`` characters.

    Prefers the last newline, then the last space, at or before the limit, and
    only when it falls in the second half of the window; otherwise cuts hard.
    """
    chunks: list[str] = []
    remaining = text

    while remaining:
        if len(remaining) <= max_length:
            chunks.append(remaining)
            break

        split_index = remaining.rfind("\n", 0, max_length + 1)
        if split_index < max_length / 2:
            split_index = remaining.rfind(" ", 0, max_length + 1)
        if split_index < max_length / 2:
            split_index = max_length

        chunks.append(remaining[:split_index])
        remaining = remaining[split_index:].lstrip()

    return chunks


def _rich_text(text: str) -> list[dict[str, Any]]:
    return [
        {"type": "text", "text": {"content": chunk}}
        for chunk in split_text_into_chunks(text)
    ]


def _block(block_type: str, body: dict[str, Any]) -> dict[str, Any]:
    return {"object": "block", "type": block_type, block_type: body}


def outline_to_notion_blocks(blocks: list[OutlineBlock]) -> list[dict[str, Any]]:
    """Convert outline blocks to Notion block objects."""
    result: list[dict[str, Any]] = []
    for block in blocks:
        if block.kind == "heading":
            result.append(_block(f"heading_{block.level or 2}", {"rich_text": _rich_text(block.text)}))
        elif block.kind == "paragraph":
            # Long paragraphs become consecutive paragraph blocks
            for chunk in split_text_into_chunks(block.text) or [""]:
                result.append(
                    _block("paragraph", {"rich_text": [{"type": "text", "text": {"content": chunk}}]})
                )
        elif block.kind == "code":
            result.append(
                _block(
                    "code",
                    {"rich_text": _rich_text(block.text), "language": block.language or "plain text"},
                )
            )
        elif block.kind == "toggle":
            result.append(
                _block(
                    "toggle",
                    {
                        "rich_text": _rich_text(block.text),
                        "children": outline_to_notion_blocks(block.children),
                    },
                )
            )
        else:
            result.append(_block(block.kind, {"rich_text": _rich_text(block.text)}))
    return result


def build_page_properties(bundle: ExportBundle) -> dict[str, Any]:
    """Optional database properties: Category, Archetype, Price, Target Rate, Profitability, Status."""
    properties: dict[str, Any] = {}
    if bundle.project_category:
        properties["Category"] = {"select": {"name": bundle.project_category}}
    if bundle.analysis is not None:
        properties["Archetype"] = {"rich_text": [{"text": {"content": bundle.analysis.archetype}}]}
    if bundle.pricing is not None and bundle.pricing.tiers.standard.price > 0:
        properties["Price"] = {"number": bundle.pricing.tiers.standard.price}
    properties["Target Rate"] = {"number": resolve_target_rate(bundle.pricing)}
    properties["Profitability"] = {"select": {"name": profitability_status(bundle.pricing)}}
    properties["Status"] = {"select": {"name": "Draft"}}
    return properties


class NotionService:
    """Creates pages in a Notion database."""

    def __init__(
        self,
        api_key: str,
        notion_version: str = "2022-06-28",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Notion-Version": notion_version,
            "Content-Type": "application/json",
        }
        self._transport = transport

    async def _request(
        self, client: httpx.AsyncClient, method: str, path: str, payload: dict
    ) -> dict:
        resp = await client.request(method, f"{NOTION_API}{path}", headers=self._headers, json=payload)
        if resp.is_success:
            return resp.json()

        try:
            body = resp.json()
        except ValueError:
            body = {}
        raise NotionAPIError(
            resp.status_code,
            body.get("code", "unknown"),
            body.get("message", resp.text[:200]),
        )

    async def _create(
        self,
        client: httpx.AsyncClient,
        database_id: str,
        properties: dict[str, Any],
        children: list[dict[str, Any]],
    ) -> dict:
        return await self._request(
            client,
            "POST",
            "/pages",
            {
                "parent": {"database_id": database_id},
                "properties": properties,
                "children": children,
            },
        )

    async def create_page(
        self,
        database_id: str,
        title: str,
        blocks: list[OutlineBlock],
        properties: dict[str, Any] | None = None,
    ) -> PublishedPage:
        """
        Create a database page with the given outline as its body.

        At most 100 blocks go with the create call; the rest are appended in
        batches of 100. When Notion rejects the optional properties, the page
        is created again with the title property only.

        Raises:
            ServiceError: Unauthorized, rate limited, or Notion unreachable
            NotFoundError: Database not found or not shared with the integration
            ValidationError: Notion rejected the request payload
        """
        children = outline_to_notion_blocks(blocks)
        first_batch = children[:MAX_CHILDREN_PER_REQUEST]
        base_properties = {"title": {"title": [{"text": {"content": title or "Untitled Project"}}]}}

        try:
            async with httpx.AsyncClient(timeout=30, transport=self._transport) as client:
                try:
                    page = await self._create(
                        client, database_id, {**base_properties, **(properties or {})}, first_batch
                    )
                except NotionAPIError as e:
                    if not (
                        properties and e.code == "validation_error" and "propert" in e.message.lower()
                    ):
                        raise
                    logger.warning(
                        f"Notion rejected page properties, retrying with title only: {e.message}",
                        extra={"database_id": database_id},
                    )
                    page = await self._create(client, database_id, base_properties, first_batch)

                page_id = page["id"]
                for start in range(MAX_CHILDREN_PER_REQUEST, len(children), MAX_CHILDREN_PER_REQUEST):
                    await self._request(
                        client,
                        "PATCH",
                        f"/blocks/{page_id}/children",
                        {"children": children[start : start + MAX_CHILDREN_PER_REQUEST]},
                    )
        except NotionAPIError as e:
            raise _map_notion_error(e) from e
        except httpx.HTTPError as e:
            raise ServiceError(
                f"Notion request failed: {e}",
                user_message="Could not reach Notion. Please try again.",
                service="notion",
            ) from e

        url = page.get("url") or f"https://notion.so/{page_id.replace('-', '')}"
        logger.info(
            f"Created Notion page {page_id} with {len(children)} blocks",
            extra={"database_id": database_id},
        )
        return PublishedPage(page_id=page_id, url=url)

    async def export_bundle(self, database_id: str, bundle: ExportBundle) -> PublishedPage:
        """Render a bundle to an outline and publish it as a page."""
        return await self.create_page(
            database_id,
            bundle.project_title,
            build_outline(bundle),
            build_page_properties(bundle),
        )


def _map_notion_error(e: NotionAPIError) -> Exception:
    if e.status in (401, 403):
        return ServiceError(
            str(e),
            user_message="Notion rejected the integration. Check the token and share the database with it.",
            service="notion",
        )
    if e.status == 404:
        return NotFoundError(
            str(e),
            user_message="Notion database not found. Check the id and share it with the integration.",
        )
    if e.status == 400:
        return ValidationError(str(e), user_message=f"Notion rejected the page: {e.message}")
    return ServiceError(
        str(e),
        user_message="Notion is unavailable right now. Please try again.",
        service="notion",
    )


def get_notion_service() -> NotionService:
    """
    Notion service from settings.

    Raises:
        ServiceError: If NOTION_API_KEY is not configured
    """
    settings = get_settings()
    if not settings.NOTION_API_KEY:
        raise ServiceError(
            "NOTION_API_KEY is not configured",
            user_message="Notion export is not configured.",
            service="notion",
        )
    return NotionService(settings.NOTION_API_KEY, settings.NOTION_VERSION)
