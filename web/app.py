"""FastAPI web application for Yomitoki parsing and kana readings."""

import logging

from fastapi import FastAPI, Form
from fastapi.responses import JSONResponse

from yomitoki import (
    EngineInitializationError,
    InvalidArgumentError,
    KanaResult,
    ParseResult,
    active_backend,
)

from .state import app_state

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Yomitoki",
    description="Japanese morphological parsing and kana readings",
    version="0.1.0",
)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@app.get("/api/health")
async def health():
    """Report the analyzer backend in use (or that 'auto' would pick)."""
    try:
        handle = app_state.get_handle()
    except ValueError as e:
        return JSONResponse({"status": "error", "error": str(e)}, status_code=503)

    backend = handle.backend_name or active_backend()
    return {"status": "ok", "backend": backend}


@app.post("/api/parse")
def parse_text(text: str = Form(...)):
    """Parse text into per-token feature fields."""
    try:
        tokens = app_state.parser.parse(text)
    except InvalidArgumentError as e:
        return _error(str(e), 400)
    except (EngineInitializationError, ValueError) as e:
        logger.error("Parse request failed: %s", e)
        return _error(str(e), 503)

    return ParseResult(text=text, tokens=tokens).to_dict()


@app.post("/api/kana")
def kana_text(text: str = Form(...), use_surface_fallback: bool = Form(False)):
    """Convert text to its katakana reading."""
    try:
        kana = app_state.kana.to_kana(text, use_surface_fallback)
    except InvalidArgumentError as e:
        return _error(str(e), 400)
    except (EngineInitializationError, ValueError) as e:
        logger.error("Kana request failed: %s", e)
        return _error(str(e), 503)

    return KanaResult(
        text=text, kana=kana, use_surface_fallback=use_surface_fallback
    ).to_dict()
