"""Diff submission and retrieval endpoints"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from models.diff import DiffView, SubmitRequest, SubmitResponse
from services.diff_service import get_diff_service
from services.viewer import render_page

router = APIRouter()


@router.post("/data-upload", response_model=SubmitResponse)
async def upload_data(request: SubmitRequest) -> SubmitResponse:
    """Store a new (oldData, newData) pair and return its change summary"""
    return get_diff_service().submit(request.oldData, request.newData)


@router.get("/diff/{diff_id}", response_class=HTMLResponse)
async def show_diff(diff_id: str) -> HTMLResponse:
    """Side-by-side HTML view of a stored diff"""
    document = get_diff_service().render_document(diff_id)
    return HTMLResponse(render_page(document), media_type="text/html;charset=UTF-8")


@router.get("/api/diffs/{diff_id}", response_model=DiffView)
async def get_diff(diff_id: str) -> DiffView:
    """Structured JSON view of a stored diff"""
    return get_diff_service().view(diff_id)
