from __future__ import annotations

from fastapi import FastAPI

from policy_preview.app.api.routers import preview_router
from policy_preview.app.health import router as health_router
from policy_preview.observability.logging import configure_logging

configure_logging()

app = FastAPI()
app.include_router(health_router)
app.include_router(preview_router, prefix="/v1", tags=["policy-preview"])
