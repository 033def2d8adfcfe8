"""Infra/diagnostic routes (non-prod helpers)."""

from fastapi import APIRouter, HTTPException

from flashembed.config import get_settings

router = APIRouter()


@router.get("/health", tags=["infra"])
def health() -> dict[str, str]:
    """Return basic service health."""
    return {"status": "ok"}


@router.get("/debug/error", tags=["infra"])
def debug_error() -> None:
    """Intentionally raise an error to exercise the 500 handler in non-prod."""
    if get_settings().env == "prod":
        raise HTTPException(404, "Not found")
    raise RuntimeError("Simulated failure for testing purposes")
