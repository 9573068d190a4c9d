"""Tests for the Notion export service against a mocked transport."""

import json

import httpx
import pytest

from crafter.core.config import get_settings
from crafter.core.errors import NotFoundError, ServiceError, ValidationError
from crafter.core.schemas_export import ExportBundle, OutlineBlock
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_profile import ProfileAnalysis
from crafter.services.notion_service import (
    NotionService,
    build_page_properties,
    get_notion_service,
    outline_to_notion_blocks,
    split_text_into_chunks,
)
from tests.fixtures_wizard import PRICING_SELECTIONS, PROFILE_ANALYSIS

PAGE = {"object": "page", "id": "3f1c2b4a-0000-4000-8000-000000000001", "url": "https://www.notion.so/page-1"}


class RecordingHandler:
    """MockTransport handler that records requests and replays queued responses."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        if request.method == "PATCH":
            return httpx.Response(200, json={"object": "list", "results": []})
        return httpx.Response(200, json=PAGE)

    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


def make_service(handler) -> NotionService:
    return NotionService("secret_test", transport=httpx.MockTransport(handler))


def paragraphs(count: int) -> list[OutlineBlock]:
    return [OutlineBlock(kind="paragraph", text=f"Paragraph {i}") for i in range(count)]


def notion_error(status: int, code: str, message: str) -> httpx.Response:
    return httpx.Response(
        status, json={"object": "error", "status": status, "code": code, "message": message}
    )


# =======================
# Text and block conversion
# =======================


def test_split_short_text_is_single_chunk():
    assert split_text_into_chunks("hello") == ["hello"]
    assert split_text_into_chunks("") == []


def test_split_prefers_newline_boundary():
    text = "a" * 1500 + "\n" + "b" * 1000

    assert split_text_into_chunks(text) == ["a" * 1500, "b" * 1000]


def test_split_falls_back_to_space_then_hard_cut():
    spaced = "word " * 600
    hard = "x" * 4500

    spaced_chunks = split_text_into_chunks(spaced)
    assert all(len(c) <= 2000 for c in spaced_chunks)
    assert all(not c.startswith(" ") for c in spaced_chunks)
    assert [len(c) for c in split_text_into_chunks(hard)] == [2000, 2000, 500]


def test_long_paragraph_becomes_several_blocks():
    blocks = outline_to_notion_blocks([OutlineBlock(kind="paragraph", text="x" * 4500)])

    assert [b["type"] for b in blocks] == ["paragraph"] * 3
    assert all(
        len(b["paragraph"]["rich_text"][0]["text"]["content"]) <= 2000 for b in blocks
    )


def test_block_types_map_to_notion():
    blocks = outline_to_notion_blocks(
        [
            OutlineBlock(kind="heading", text="Pricing Tiers", level=2),
            OutlineBlock(kind="heading", text="Add-Ons", level=3),
            OutlineBlock(kind="code", text="prompt", language="plain text"),
            OutlineBlock(
                kind="toggle",
                text="Question?",
                children=[OutlineBlock(kind="paragraph", text="Answer.")],
            ),
            OutlineBlock(kind="numbered_list_item", text="Step"),
        ]
    )

    assert [b["type"] for b in blocks] == [
        "heading_2",
        "heading_3",
        "code",
        "toggle",
        "numbered_list_item",
    ]
    assert blocks[2]["code"]["language"] == "plain text"
    assert blocks[3]["toggle"]["children"][0]["type"] == "paragraph"


def test_page_properties():
    bundle = ExportBundle(
        project_category="Development & IT",
        pricing=PricingSelections.model_validate(PRICING_SELECTIONS),
        analysis=ProfileAnalysis.model_validate(PROFILE_ANALYSIS),
    )

    properties = build_page_properties(bundle)

    assert properties["Category"] == {"select": {"name": "Development & IT"}}
    assert properties["Price"] == {"number": 600}
    assert properties["Target Rate"] == {"number": 100}
    assert properties["Profitability"] == {"select": {"name": "High Margin"}}
    assert properties["Status"] == {"select": {"name": "Draft"}}
    assert properties["Archetype"]["rich_text"][0]["text"]["content"] == "Data Platform Engineer"


def test_page_properties_without_pricing():
    properties = build_page_properties(ExportBundle())

    assert "Price" not in properties
    assert properties["Profitability"] == {"select": {"name": "Unknown"}}


# =======================
# Page creation
# =======================


@pytest.mark.asyncio
async def test_create_page_batches_children():
    handler = RecordingHandler()

    page = await make_service(handler).create_page("db-1", "My Listing", paragraphs(250))

    assert page.page_id == PAGE["id"]
    assert page.url == PAGE["url"]
    assert [r.method for r in handler.requests] == ["POST", "PATCH", "PATCH"]
    bodies = handler.bodies()
    assert len(bodies[0]["children"]) == 100
    assert bodies[0]["parent"] == {"database_id": "db-1"}
    assert bodies[0]["properties"]["title"]["title"][0]["text"]["content"] == "My Listing"
    assert handler.requests[1].url.path == f"/v1/blocks/{PAGE['id']}/children"
    assert [len(b["children"]) for b in bodies[1:]] == [100, 50]


@pytest.mark.asyncio
async def test_create_page_sends_auth_and_version_headers():
    handler = RecordingHandler()

    await make_service(handler).create_page("db-1", "My Listing", paragraphs(1))

    request = handler.requests[0]
    assert request.headers["Authorization"] == "Bearer secret_test"
    assert request.headers["Notion-Version"] == "2022-06-28"


@pytest.mark.asyncio
async def test_rejected_properties_fall_back_to_title_only():
    handler = RecordingHandler(
        notion_error(400, "validation_error", "Profitability is not a property that exists.")
    )

    page = await make_service(handler).create_page(
        "db-1", "My Listing", paragraphs(3), {"Profitability": {"select": {"name": "Unknown"}}}
    )

    assert page.page_id == PAGE["id"]
    first, second = handler.bodies()
    assert "Profitability" in first["properties"]
    assert list(second["properties"]) == ["title"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response,error_type",
    [
        (notion_error(404, "object_not_found", "Could not find database"), NotFoundError),
        (notion_error(401, "unauthorized", "API token is invalid."), ServiceError),
        (notion_error(403, "restricted_resource", "Insufficient permissions"), ServiceError),
        (notion_error(400, "validation_error", "body.children[0] should be defined"), ValidationError),
        (notion_error(429, "rate_limited", "Slow down"), ServiceError),
        (httpx.Response(502, text="Bad gateway"), ServiceError),
    ],
)
async def test_notion_errors_are_mapped(response, error_type):
    handler = RecordingHandler(response)

    with pytest.raises(error_type):
        await make_service(handler).create_page("db-1", "My Listing", paragraphs(1))

    assert len(handler.requests) == 1


@pytest.mark.asyncio
async def test_transport_failure_is_a_service_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ServiceError):
        await make_service(handler).create_page("db-1", "My Listing", paragraphs(1))


@pytest.mark.asyncio
async def test_export_bundle_publishes_outline_and_properties():
    handler = RecordingHandler()
    bundle = ExportBundle(
        project_title="dbt pipeline listing",
        pricing=PricingSelections.model_validate(PRICING_SELECTIONS),
    )

    await make_service(handler).export_bundle("db-1", bundle)

    body = handler.bodies()[0]
    assert body["properties"]["title"]["title"][0]["text"]["content"] == "dbt pipeline listing"
    assert body["properties"]["Profitability"] == {"select": {"name": "High Margin"}}
    assert body["children"][0]["type"] == "heading_2"


# =======================
# Configuration
# =======================


def test_notion_service_requires_api_key(monkeypatch):
    monkeypatch.delenv("NOTION_API_KEY", raising=False)
    get_settings.cache_clear()
    try:
        with pytest.raises(ServiceError):
            get_notion_service()
    finally:
        get_settings.cache_clear()


def test_notion_service_from_settings(monkeypatch):
    monkeypatch.setenv("NOTION_API_KEY", "secret_from_env")
    get_settings.cache_clear()
    try:
        assert isinstance(get_notion_service(), NotionService)
    finally:
        get_settings.cache_clear()
