from __future__ import annotations

from cheese_wizard.api.routes.cheeses import router as cheeses_router
from cheese_wizard.api.routes.health import router as health_router
from cheese_wizard.api.routes.users import router as users_router

__all__ = ["cheeses_router", "health_router", "users_router"]
