"""API routers for the policy preview endpoints."""

from policy_preview.app.api.routers.preview import router as preview_router

__all__ = ["preview_router"]
