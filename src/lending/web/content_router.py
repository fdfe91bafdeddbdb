"""FastAPI router for read-only page content."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request

router = APIRouter()


@router.get("/api/content")
async def list_sections(request: Request) -> list[dict[str, Any]]:
    store = request.app.state.content_store
    return [section.model_dump() for section in store.list_sections()]


@router.get("/api/content/{section_id}")
async def get_section(section_id: str, request: Request) -> dict[str, Any]:
    store = request.app.state.content_store
    section = store.get_section(section_id)
    if section is None:
        raise HTTPException(status_code=404, detail=f"Content section {section_id!r} not found")
    return section.model_dump()
