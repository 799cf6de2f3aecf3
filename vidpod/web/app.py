#!/usr/bin/env python3
"""
app.py
-------------------
FastAPI application for story idea imports and browsing.

Routes:
    POST /api/stories/import            Bulk CSV import (multipart field ``csv``, optional ``autoApprove``)
    GET  /api/stories/import/template   CSV template download
    GET  /api/stories                   Filtered story list
    GET  /api/stories/{story_id}        One story
    GET  /api/tags                      All tags by name

Import responses are 201 whenever the file could be processed, even if
every row failed; per-row problems are reported in ``errors`` and
``warnings``. Whole-file problems return 400 with the same body plus an
``error`` field.

Usage:
    from vidpod.database import VidpodDB
    from vidpod.web import create_app

    app = create_app(VidpodDB("sqlite:///data/vidpod.db"))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import date
from typing import Any, Dict, Optional

# --- Third party imports ---
from fastapi import Depends, FastAPI, File, Form, HTTPException, Query, UploadFile, status
from fastapi.responses import JSONResponse, Response

# --- Local imports ---
from vidpod.core.exceptions import DatabaseError, ImportFileError, ImportPermissionError
from vidpod.core.logging_manager import VidpodLogger, safe_logger
from vidpod.database.manager import VidpodDB
from vidpod.importer import ImportSummary, StoryImporter, UploaderIdentity
from vidpod.importer.template import TEMPLATE_FILENAME, generate_template
from vidpod.utils.dates import parse_flexible_date
from vidpod.utils.parsers import split_comma_list
from .auth import get_current_uploader
from .serializers import serialize_story, serialize_tag


def _file_error_body(error: Exception) -> Dict[str, Any]:
    body = ImportSummary().to_dict()
    body["message"] = "CSV import failed"
    body["error"] = str(error)
    return body


def _parse_query_date(value: Optional[str], name: str) -> Optional[date]:
    """Parse a date filter with the import parser; 400 when unreadable."""
    if not value:
        return None
    parsed = parse_flexible_date(value)
    if parsed is None or not parsed.is_calendar_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {name}: {value}",
        )
    return parsed.to_date()


def create_app(
    db: VidpodDB,
    *,
    logger: Optional[VidpodLogger] = None,
    today: Optional[date] = None,
    pivot: Optional[int] = None,
) -> FastAPI:
    """
    Return a configured FastAPI application bound to ``db``.

    Args:
        db: Database manager
        logger: Optional logger; defaults to the database logger
        today: Reference day for year-less dates (tests pin this)
        pivot: Optional two-digit year pivot override
    """
    app_logger = logger if logger is not None else db.logger
    importer = StoryImporter(db, logger=app_logger, today=today, pivot=pivot)

    app = FastAPI(
        title="VidPOD",
        description="Story idea import and browsing",
    )
    app.state.db = db
    app.state.importer = importer

    def _log() -> VidpodLogger:
        return safe_logger(app_logger)

    # -------------------------------------------------------------------------
    # Import
    # -------------------------------------------------------------------------

    @app.post("/api/stories/import", status_code=status.HTTP_201_CREATED)
    def import_stories(
        csv_file: Optional[UploadFile] = File(None, alias="csv"),
        auto_approve: bool = Form(False, alias="autoApprove"),
        uploader: UploaderIdentity = Depends(get_current_uploader),
    ) -> Any:
        if not uploader.can_import:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Users with role '{uploader.role.value}' cannot import story ideas",
            )

        payload = csv_file.file.read() if csv_file is not None else None
        _log().log_info(
            "csv_upload_received",
            {
                "uploader_id": uploader.user_id,
                "filename": csv_file.filename if csv_file is not None else None,
                "bytes": len(payload) if payload is not None else 0,
            },
        )

        try:
            summary = importer.import_file(payload, uploader, auto_approve=auto_approve)
        except ImportPermissionError as error:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN, detail=str(error)
            ) from error
        except ImportFileError as error:
            _log().log_warning("csv_upload_rejected", {"error": str(error)})
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content=_file_error_body(error),
            )

        return summary.to_dict()

    @app.get("/api/stories/import/template")
    def download_template() -> Response:
        return Response(
            content=generate_template(),
            media_type="text/csv",
            headers={
                "Content-Disposition": f'attachment; filename="{TEMPLATE_FILENAME}"'
            },
        )

    # -------------------------------------------------------------------------
    # Browse
    # -------------------------------------------------------------------------

    @app.get("/api/stories")
    def list_stories(
        search: Optional[str] = Query(None),
        tags: Optional[str] = Query(None),
        start_date: Optional[str] = Query(None, alias="startDate"),
        end_date: Optional[str] = Query(None, alias="endDate"),
        interviewee: Optional[str] = Query(None),
    ) -> Dict[str, Any]:
        start = _parse_query_date(start_date, "startDate")
        end = _parse_query_date(end_date, "endDate")

        try:
            with db.session_scope():
                stories = db.stories.search(
                    search=search,
                    tags=split_comma_list(tags) or None,
                    start_date=start,
                    end_date=end,
                    interviewee=interviewee,
                )
                items = [serialize_story(story) for story in stories]
        except DatabaseError as error:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
            ) from error

        return {"stories": items, "count": len(items)}

    @app.get("/api/stories/{story_id}")
    def get_story(story_id: int) -> Dict[str, Any]:
        with db.session_scope():
            story = db.stories.get(story_id)
            if story is None:
                raise HTTPException(status_code=404, detail="Story not found")
            return {"story": serialize_story(story)}

    @app.get("/api/tags")
    def list_tags() -> Dict[str, Any]:
        with db.session_scope():
            tags = [serialize_tag(tag) for tag in db.tags.get_all()]
        return {"tags": tags}

    return app
