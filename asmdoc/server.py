"""FastAPI server for asmdoc.

Builds documentation from list file and labels text posted by editor
integrations. Endpoints are registered on an ``APIRouter`` so that other
applications can mount them under a prefix.

The standalone ``app`` object includes the router directly::

    uvicorn asmdoc.server:app --reload --port 8421
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from asmdoc import __version__
from asmdoc.config import DocConfig
from asmdoc.exporters import ExporterRegistry
from asmdoc.hierarchy.descriptions import MAX_BLANK_LINES
from asmdoc.hierarchy.tree import HierarchyTree
from asmdoc.listing.base import ListingError
from asmdoc.listing.kinds import DEFAULT_SCAN_LINES
from asmdoc.listing.labels import read_labels
from asmdoc.listing.listfile import DEFAULT_SOURCE_COLUMN, ListFile
from asmdoc.pipeline import build_documentation

logger = logging.getLogger(__name__)

router = APIRouter()

app = FastAPI(
    title="asmdoc API",
    description="Documentation from assembler list files",
    version=__version__,
)


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class DocumentRequest(BaseModel):
    """List file and labels file content of one documentation run."""

    listing: str
    labels: str
    name: str | None = None
    title: str = "Assembler Documentation"
    source_column: int = Field(default=DEFAULT_SOURCE_COLUMN, ge=0)
    max_blank_lines: int = Field(default=MAX_BLANK_LINES, ge=0)
    classify_kinds: bool = True
    kind_scan_lines: int = Field(default=DEFAULT_SCAN_LINES, ge=0)


def _build(request: DocumentRequest) -> HierarchyTree:
    config = DocConfig(
        title=request.title,
        source_column=request.source_column,
        max_blank_lines=request.max_blank_lines,
        classify_kinds=request.classify_kinds,
        kind_scan_lines=request.kind_scan_lines,
    )
    try:
        listing = ListFile.from_text(
            request.listing,
            source_column=request.source_column,
            name=request.name,
        )
        return build_documentation(listing, read_labels(request.labels), config)
    except (ListingError, ValueError) as e:
        logger.warning("Failed to build documentation: %s", e)
        raise HTTPException(status_code=400, detail=str(e)) from e


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@router.get("/api/health")
async def health_check() -> dict[str, str]:
    return {"status": "ok", "version": __version__}


@router.get("/api/formats")
async def get_formats() -> dict[str, list[str]]:
    return {"formats": ExporterRegistry.available_exporters()}


@router.post("/api/hierarchy")
async def build_hierarchy(request: DocumentRequest) -> dict[str, Any]:
    """Return the documented label hierarchy as JSON."""
    return _build(request).to_dict()


@router.post("/api/render", response_class=HTMLResponse)
async def render_html(request: DocumentRequest) -> HTMLResponse:
    """Return the documentation as an HTML page."""
    tree = _build(request)
    return HTMLResponse(ExporterRegistry.render(tree, "html"))


app.include_router(router)


def run_server(host: str = "127.0.0.1", port: int = 8421) -> None:
    """Start the server via uvicorn."""
    import uvicorn

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    run_server()
