"""FastAPI web service for Markdown to chat component JSON conversion.

Endpoints::

    POST /convert       Upload a .md file and receive the JSON component.
    POST /convert/text  Send raw Markdown text, receive the JSON component.
    GET  /health        Health check.
    GET  /styles        List available style presets.

Run::

    uvicorn jsoncrafter.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, File, Form, HTTPException, UploadFile

from jsoncrafter import __version__
from jsoncrafter.converter import Converter
from jsoncrafter.style_manager import StyleManager

logger = logging.getLogger(__name__)

app = FastAPI(
    title="jsoncrafter",
    description="Markdown to chat component JSON conversion service",
    version=__version__,
)


def _converter(style: str) -> Converter:
    try:
        return Converter(style_preset=style)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/styles")
async def list_styles() -> dict[str, list[str]]:
    """List available style presets."""
    return {"presets": StyleManager.PRESETS}


@app.post("/convert")
async def convert_file(
    file: UploadFile = File(...),
    style: str = Form("default"),
    encoding: str = Form("utf-8"),
) -> dict[str, Any]:
    """Upload a Markdown file and receive the chat component back.

    - **file**: Markdown file (.md)
    - **style**: Style preset name (default, vivid, muted, minimal)
    - **encoding**: Source file encoding
    """
    converter = _converter(style)
    raw = await file.read()
    try:
        md_text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        logger.warning("Could not decode upload %r as %s", file.filename, encoding)
        raise HTTPException(status_code=400, detail=f"cannot decode file: {exc}") from exc

    return converter.convert_json(md_text)


@app.post("/convert/text")
async def convert_text(
    markdown: str = Form(...),
    style: str = Form("default"),
) -> dict[str, Any]:
    """Send raw Markdown text and receive the chat component.

    - **markdown**: Markdown source text
    - **style**: Style preset name
    """
    converter = _converter(style)
    return converter.convert_json(markdown)
