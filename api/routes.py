"""HTTP routes: concept generation, health check, and stock tool images."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Header, HTTPException, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import ValidationError

from api.schemas import GenerateRequest
from core.models import utc_now_iso
from core.pipeline import GenerationService, ProviderNotConfigured
from prompts.templates import TOOL_IMAGE_BANNER_PARAMS, TOOL_IMAGE_SQUARE_PARAMS, TOOL_IMAGES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = {"error": error}
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


def get_service(request: Request) -> GenerationService:
    return request.app.state.service


async def _read_payload(request: Request) -> GenerateRequest:
    raw = await request.body()
    if not raw.strip():
        return GenerateRequest()
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={"error": "Invalid request body", "details": f"Body is not valid JSON: {e}"},
        )
    if not isinstance(data, dict):
        raise HTTPException(
            status_code=400,
            detail={"error": "Invalid request body", "details": "Body must be a JSON object"},
        )
    try:
        return GenerateRequest.model_validate(data)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise HTTPException(
            status_code=400,
            detail={"error": "Invalid request body", "details": f"Invalid field(s): {fields}"},
        )


# ============================
# Generate
# ============================

@router.options("/generate")
def generate_preflight():
    return Response(status_code=200)


@router.post("/generate")
async def generate(request: Request, x_session_id: str | None = Header(default=None)):
    payload = await _read_payload(request)

    if not payload.category:
        return error_response(400, "Category is required")

    service = get_service(request)
    try:
        service.ensure_configured()
    except ProviderNotConfigured as e:
        logger.error("Generate rejected: %s", e.error)
        return error_response(500, e.error, e.details)

    logger.info("Generating for: category=%s brand=%s count=%s", payload.category, payload.brand, payload.count)

    try:
        batch = await run_in_threadpool(
            service.generate,
            payload.category,
            payload.brand or None,
            payload.count,
            x_session_id or None,
        )
    except Exception as e:
        logger.exception("Generation failed")
        return error_response(500, "Failed to generate", str(e))

    return batch.to_dict()


# ============================
# Health
# ============================

@router.get("/health")
def health(request: Request):
    key = request.app.state.settings.openai_api_key
    return {
        "status": "ok",
        "message": "Church & Dwight Innovation API is running",
        "timestamp": utc_now_iso(),
        "env": {
            "hasOpenAIKey": bool(key),
            "keyPrefix": key[:7] if key else "not set",
        },
    }


# ============================
# Tool images
# ============================

def _strip_extension(name: str) -> str:
    for ext in (".png", ".jpg"):
        if name.endswith(ext):
            return name[: -len(ext)]
    return name


def _redirect_to_tool_image(name: str, params: str) -> RedirectResponse:
    base_url = TOOL_IMAGES.get(_strip_extension(name))
    if base_url is None:
        raise HTTPException(status_code=404, detail="Image not found")
    return RedirectResponse(f"{base_url}?{params}", status_code=302)


@router.get("/images")
def tool_image(name: str | None = None):
    if not name:
        raise HTTPException(status_code=400, detail="Image name is required")
    return _redirect_to_tool_image(name, TOOL_IMAGE_BANNER_PARAMS)


@router.get("/images/{name}")
def tool_image_by_path(name: str):
    return _redirect_to_tool_image(name, TOOL_IMAGE_SQUARE_PARAMS)
