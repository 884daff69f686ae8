"""FastAPI application that exposes the activity suggester UI and JSON API."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, ConfigDict

from .catalog import CatalogLoadResult, load_catalog_async
from .config import AppSettings
from .filters import apply_filters
from .formatting import format_category, format_difficulty, format_duration
from .models import Activity, FilterSelection
from .paths import get_static_dir
from .preferences import FilterStore
from .selection import RandomSource
from .session import SuggestionSession

logger = logging.getLogger(__name__)

NO_MATCH_MESSAGE = "No activities match your filters. Try adjusting them."


class FilterPayload(BaseModel):
    duration: Optional[str] = None
    type: Optional[str] = None

    model_config = ConfigDict(extra="forbid")


def create_app(
    *,
    settings: Optional[AppSettings] = None,
    random_source: Optional[RandomSource] = None,
) -> FastAPI:
    """Instantiate the FastAPI application."""
    resolved_settings = settings or AppSettings()
    store = (
        FilterStore(resolved_settings.filters_path)
        if resolved_settings.filters_path is not None
        else None
    )
    session = SuggestionSession(store=store)

    app = FastAPI(title="Activity Suggester", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = resolved_settings
    app.state.session = session
    app.state.catalog_result = None

    static_dir = get_static_dir()
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    async def _reload_catalog() -> CatalogLoadResult:
        result = await load_catalog_async(
            resolved_settings.catalog_source,
            timeout=resolved_settings.timeout_seconds,
        )
        session.replace_catalog(result.activities)
        app.state.catalog_result = result
        if result.used_fallback:
            logger.warning("Serving built-in activities: %s", result.error)
        return result

    @app.on_event("startup")
    async def _startup() -> None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
        await _reload_catalog()

    @app.get("/api/status")
    def status(request: Request) -> Dict[str, Any]:
        result: Optional[CatalogLoadResult] = request.app.state.catalog_result
        return {
            "loaded": result is not None,
            "activity_count": len(session.catalog),
            "catalog_source": resolved_settings.catalog_source,
            "used_fallback": bool(result and result.used_fallback),
            "error": result.error if result else None,
            "filters": session.filters.to_dict(),
            "persisting_filters": store is not None,
        }

    @app.get("/api/activities")
    def activities(
        duration: Optional[str] = Query(
            default=None,
            description="Duration bucket: any, short, standard, long or extended.",
        ),
        type: Optional[str] = Query(
            default=None,
            description="Activity type: any, fun or chores.",
        ),
    ) -> Dict[str, Any]:
        if duration is None and type is None:
            selection = session.filters
            matches = session.filtered_activities
        else:
            selection = _selection_or_400(
                session.filters, duration=duration, category=type
            )
            matches = apply_filters(session.catalog, selection)
        return {
            "filters": selection.to_dict(),
            "count": len(matches),
            "total": len(session.catalog),
            "activities": [_activity_payload(activity) for activity in matches],
        }

    @app.get("/api/filters")
    def get_filters() -> Dict[str, Any]:
        return _filters_payload(session)

    @app.put("/api/filters")
    def put_filters(payload: FilterPayload) -> Dict[str, Any]:
        updates = payload.model_dump(exclude_unset=True)
        try:
            session.update_filters(
                duration=updates.get("duration"), category=updates.get("type")
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _filters_payload(session)

    @app.post("/api/filters/reset")
    def reset_filters() -> Dict[str, Any]:
        session.reset_filters()
        return _filters_payload(session)

    @app.get("/api/suggestion")
    def suggestion() -> Dict[str, Any]:
        activity = session.suggest(random_source)
        return {
            "activity": _activity_payload(activity) if activity else None,
            "match_count": len(session.filtered_activities),
            "filters": session.filters.to_dict(),
            "message": None if activity else NO_MATCH_MESSAGE,
        }

    @app.get("/api/stats")
    def stats(
        scope: str = Query(
            default="all",
            description="Compute stats over 'all' activities or the 'filtered' subset.",
        ),
    ) -> Dict[str, Any]:
        if scope not in ("all", "filtered"):
            raise HTTPException(status_code=400, detail="scope must be 'all' or 'filtered'")
        payload = session.stats(filtered=scope == "filtered").to_dict()
        payload["scope"] = scope
        payload["options"] = session.option_counts()
        return payload

    @app.post("/api/catalog/reload")
    async def reload_catalog() -> Dict[str, Any]:
        result = await _reload_catalog()
        return {
            "activity_count": len(result.activities),
            "used_fallback": result.used_fallback,
            "error": result.error,
        }

    @app.get("/")
    def index(request: Request):
        index_path = (get_static_dir() / "index.html").resolve()
        if not index_path.exists():
            raise HTTPException(status_code=404, detail="UI not found")
        return FileResponse(index_path)

    return app


def _selection_or_400(
    base: FilterSelection, *, duration: Optional[str], category: Optional[str]
) -> FilterSelection:
    try:
        return base.replace(duration=duration, category=category)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _filters_payload(session: SuggestionSession) -> Dict[str, Any]:
    return {
        "filters": session.filters.to_dict(),
        "match_count": len(session.filtered_activities),
    }


def _activity_payload(activity: Activity) -> Dict[str, Any]:
    payload = activity.to_dict()
    payload["duration_label"] = format_duration(activity.duration)
    payload["type_label"] = format_category(activity.category)
    if activity.difficulty:
        payload["difficulty_label"] = format_difficulty(activity.difficulty)
    return payload
