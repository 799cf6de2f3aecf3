#!/usr/bin/env python3
"""
serializers.py
-------------------
JSON shapes for stories and tags.

Dates are emitted as ISO ``YYYY-MM-DD`` strings so that clients never
reinterpret them through a timezone.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, Dict

# --- Local imports ---
from vidpod.database.models import QUESTION_COUNT, StoryIdea, Tag


def _iso(value) -> Any:
    return value.isoformat() if value is not None else None


def serialize_story(story: StoryIdea) -> Dict[str, Any]:
    """Render a story with its tags, interviewees and coverage label."""
    payload: Dict[str, Any] = {
        "id": story.id,
        "idea_title": story.idea_title,
        "idea_description": story.idea_description,
    }
    for n in range(1, QUESTION_COUNT + 1):
        payload[f"question_{n}"] = getattr(story, f"question_{n}")

    payload.update(
        {
            "coverage_start_date": _iso(story.coverage_start_date),
            "coverage_end_date": _iso(story.coverage_end_date),
            "coverage_display": story.coverage_display,
            "tags": story.tag_names,
            "interviewees": story.interviewee_names,
            "uploaded_by": story.uploaded_by,
            "uploaded_date": _iso(story.uploaded_date),
            "approval_status": story.approval_status.value,
        }
    )
    return payload


def serialize_tag(tag: Tag) -> Dict[str, Any]:
    return {"id": tag.id, "tag_name": tag.tag_name, "usage_count": tag.usage_count}
