"""API endpoints for the listing export and the Notion page export."""

from fastapi import APIRouter, Depends

from crafter.core.errors import NotFoundError
from crafter.core.export_formatter import format_export
from crafter.core.logging import get_logger
from crafter.core.schemas_export import ExportResult, NotionExportRequest, NotionExportResponse
from crafter.db.wizard_state import WizardStore, get_wizard_store, load_export_bundle
from crafter.services.notion_service import NotionService, get_notion_service

logger = get_logger(__name__)

router = APIRouter()


@router.get("/sessions/{session_id}/export", response_model=ExportResult)
async def get_export(
    session_id: str,
    store: WizardStore = Depends(get_wizard_store),
) -> ExportResult:
    """Render the session's stored state as plain text and a block outline."""
    if store.get_profile(session_id) is None:
        raise NotFoundError(f"Session {session_id} not found", user_message="Profile not found")
    return format_export(load_export_bundle(store, session_id))


@router.post("/export-notion", response_model=NotionExportResponse)
async def export_notion(
    body: NotionExportRequest,
    notion: NotionService = Depends(get_notion_service),
) -> NotionExportResponse:
    """
    Create a Notion database page from an export bundle.

    Raises:
        ServiceError: Notion not configured, unauthorized or unreachable
        NotFoundError: Database not found or not shared with the integration
    """
    page = await notion.export_bundle(body.database_id, body.project_data)
    logger.info(f"Exported to Notion page {page.page_id}")
    return NotionExportResponse(page_id=page.page_id, url=page.url)
