"""Version 1 API routers."""

from .health import health_router
from .router import router

__all__ = ["health_router", "router"]
