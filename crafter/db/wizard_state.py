"""Wizard state store: per-session key/value storage for artifacts and selections.

Keys are stage names (``project_suggestions``), input keys (``project_idea``),
selection keys (``pricing_selections``), stage status keys
(``status:<stage>``, ``started:<stage>``) and ``prompt_version:<stage>``.
Values are JSON-compatible. Writes are last-write-wins.

Supabase tables::

    create table crafter_profiles (
        id text primary key,
        resume_text text not null,
        upwork_url text not null,
        linkedin_url text not null,
        created_at timestamptz not null default now()
    );

    create table crafter_wizard_state (
        session_id text not null references crafter_profiles(id) on delete cascade,
        key text not null,
        value jsonb not null,
        updated_at timestamptz not null default now(),
        primary key (session_id, key)
    );
"""

import threading
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from crafter.core.config import get_settings
from crafter.core.logging import get_logger
from crafter.core.schemas_artifacts import ARTIFACT_TYPES
from crafter.core.schemas_description import DescriptionData
from crafter.core.schemas_export import ExportBundle
from crafter.core.schemas_pricing import PricingSelections
from crafter.core.schemas_process import ProcessSelections
from crafter.core.schemas_profile import UserProfile
from crafter.core.schemas_project import ProjectSelection
from crafter.core.wizard_flow import (
    DESCRIPTION_DATA_KEY,
    PRICING_SELECTIONS_KEY,
    PROCESS_SELECTIONS_KEY,
    PROJECT_IDEA_KEY,
    PROJECT_SELECTION_KEY,
)
from crafter.db.supabase_client import get_supabase

logger = get_logger(__name__)

PROFILES_TABLE = "crafter_profiles"
STATE_TABLE = "crafter_wizard_state"

T = TypeVar("T", bound=BaseModel)


class WizardStore(Protocol):
    def create_session(self, profile: UserProfile) -> None: ...

    def get_profile(self, session_id: str) -> UserProfile | None: ...

    def get(self, session_id: str, key: str) -> Any | None: ...

    def put(self, session_id: str, key: str, value: Any) -> None: ...

    def delete(self, session_id: str, key: str) -> None: ...

    def keys(self, session_id: str) -> list[str]: ...


class InMemoryWizardStore:
    """Process-local store. Sessions are isolated dicts; the lock keeps single calls atomic."""

    def __init__(self):
        self._lock = threading.Lock()
        self._profiles: dict[str, UserProfile] = {}
        self._state: dict[str, dict[str, Any]] = {}

    def create_session(self, profile: UserProfile) -> None:
        with self._lock:
            self._profiles[profile.id] = profile
            self._state[profile.id] = {}

    def get_profile(self, session_id: str) -> UserProfile | None:
        with self._lock:
            return self._profiles.get(session_id)

    def get(self, session_id: str, key: str) -> Any | None:
        with self._lock:
            return self._state.get(session_id, {}).get(key)

    def put(self, session_id: str, key: str, value: Any) -> None:
        with self._lock:
            self._state.setdefault(session_id, {})[key] = value

    def delete(self, session_id: str, key: str) -> None:
        with self._lock:
            self._state.get(session_id, {}).pop(key, None)

    def keys(self, session_id: str) -> list[str]:
        with self._lock:
            return sorted(self._state.get(session_id, {}))


class SupabaseWizardStore:
    """Store backed by the crafter_profiles and crafter_wizard_state tables."""

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            self._client = get_supabase()
        return self._client

    def create_session(self, profile: UserProfile) -> None:
        try:
            self.client.table(PROFILES_TABLE).insert(
                {
                    "id": profile.id,
                    "resume_text": profile.resume_text,
                    "upwork_url": profile.upwork_url,
                    "linkedin_url": profile.linkedin_url,
                    "created_at": profile.created_at.isoformat(),
                }
            ).execute()
        except Exception as e:
            logger.error(f"Failed to create session: {e}", extra={"session_id": profile.id})
            raise

        logger.info(f"Created session {profile.id}", extra={"session_id": profile.id})

    def get_profile(self, session_id: str) -> UserProfile | None:
        response = (
            self.client.table(PROFILES_TABLE).select("*").eq("id", session_id).limit(1).execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserProfile(
            id=row["id"],
            resume_text=row["resume_text"],
            upwork_url=row["upwork_url"],
            linkedin_url=row["linkedin_url"],
            created_at=row["created_at"],
        )

    def get(self, session_id: str, key: str) -> Any | None:
        response = (
            self.client.table(STATE_TABLE)
            .select("value")
            .eq("session_id", session_id)
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0]["value"]

    def put(self, session_id: str, key: str, value: Any) -> None:
        try:
            self.client.table(STATE_TABLE).upsert(
                {
                    "session_id": session_id,
                    "key": key,
                    "value": value,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                },
                on_conflict="session_id,key",
            ).execute()
        except Exception as e:
            logger.error(
                f"Failed to write {key}: {e}",
                extra={"session_id": session_id},
            )
            raise

    def delete(self, session_id: str, key: str) -> None:
        self.client.table(STATE_TABLE).delete().eq("session_id", session_id).eq(
            "key", key
        ).execute()

    def keys(self, session_id: str) -> list[str]:
        response = (
            self.client.table(STATE_TABLE).select("key").eq("session_id", session_id).execute()
        )
        return sorted(row["key"] for row in response.data or [])


@lru_cache(maxsize=1)
def get_wizard_store() -> WizardStore:
    """
    Get the configured wizard store (cached singleton).

    Returns:
        InMemoryWizardStore or SupabaseWizardStore per WIZARD_STORE_BACKEND
    """
    backend = get_settings().WIZARD_STORE_BACKEND.strip().lower()
    if backend == "supabase":
        return SupabaseWizardStore()
    if backend != "memory":
        logger.warning(f"Unknown WIZARD_STORE_BACKEND {backend!r}, using memory")
    return InMemoryWizardStore()


def read_model(store: WizardStore, session_id: str, key: str, model: type[T]) -> T | None:
    """
    Read a stored value as ``model``.

    Stored data that no longer parses (older shape, hand-edited row) is logged
    and treated as absent.
    """
    raw = store.get(session_id, key)
    if raw is None:
        return None
    try:
        return model.model_validate(raw)
    except PydanticValidationError as e:
        logger.warning(
            f"Ignoring stale {key} data: {e.error_count()} validation errors",
            extra={"session_id": session_id},
        )
        return None


def read_artifact(store: WizardStore, session_id: str, stage: str) -> BaseModel | None:
    """Read a stage's tagged artifact, or None when absent or stale."""
    return read_model(store, session_id, stage, ARTIFACT_TYPES[stage])


def write_model(store: WizardStore, session_id: str, key: str, value: BaseModel) -> None:
    store.put(session_id, key, value.model_dump(mode="json", by_alias=True))


def load_export_bundle(store: WizardStore, session_id: str) -> ExportBundle:
    """
    Aggregate everything stored for a session into an ExportBundle.

    Absent or stale pieces are left empty; the bundle is built fresh each call.
    """
    selection = read_model(store, session_id, PROJECT_SELECTION_KEY, ProjectSelection)
    analysis = read_artifact(store, session_id, "profile_analysis")
    gallery = read_artifact(store, session_id, "gallery_suggestions")
    idea = store.get(session_id, PROJECT_IDEA_KEY)

    bundle = ExportBundle(
        project_idea=idea if isinstance(idea, str) else "",
        pricing=read_model(store, session_id, PRICING_SELECTIONS_KEY, PricingSelections),
        gallery=gallery.payload if gallery is not None else None,
        process=read_model(store, session_id, PROCESS_SELECTIONS_KEY, ProcessSelections),
        description=read_model(store, session_id, DESCRIPTION_DATA_KEY, DescriptionData),
        analysis=analysis.payload if analysis is not None else None,
    )
    if selection is not None:
        bundle = bundle.model_copy(
            update={
                "project_title": selection.title,
                "project_category": selection.category,
                "search_tags": selection.search_tags,
            }
        )
    return bundle
