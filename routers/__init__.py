# routers/__init__.py

from fastapi import APIRouter

from .config import router as config_router
from .modules import router as modules_router
from .navigation import router as navigation_router
from .workspaces import router as workspaces_router
from .health import router as health_router


api_router = APIRouter()

# Static discipline configuration
api_router.include_router(config_router)

# Workspace-scoped gates
api_router.include_router(modules_router)
api_router.include_router(navigation_router)
api_router.include_router(workspaces_router)

# Health
api_router.include_router(health_router)

__all__ = ["api_router"]
