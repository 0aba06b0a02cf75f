"""Application factory for the FastAPI app.

Centralizes app construction (metadata, middleware, handlers, routers and
the in-memory service) so tests can build isolated instances.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from cheese_wizard.api.routes import cheeses_router, health_router, users_router
from cheese_wizard.core.config import Settings, parse_seed_cheeses, settings
from cheese_wizard.core.exception_handlers import setup_exception_handlers
from cheese_wizard.core.logging import configure_logging
from cheese_wizard.core.middleware import request_id_middleware
from cheese_wizard.core.openapi import apply_openapi_customizations
from cheese_wizard.services.cheese_service import CheeseWizardService

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings | None = None,
    *,
    service: CheeseWizardService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Args:
        app_settings: Settings to build from; the global settings if omitted.
        service: Service to serve; a fresh one seeded from settings if omitted.

    Returns:
        Configured FastAPI app with middleware, handlers, routers and docs.
    """
    cfg = app_settings or settings

    # Logging first so subsequent init logs are formatted as desired
    configure_logging(cfg.log)

    app = FastAPI(
        title="Cheese Wizard API",
        description=(
            "In-memory registry of cheeses and users. Users rate registered "
            "cheeses from 1 to 10, at most once per cheese."
        ),
        version="0.1.0",
        debug=cfg.app.debug,
    )

    if service is None:
        service = CheeseWizardService()
        service.seed(parse_seed_cheeses(cfg.app.seed_cheeses))
    app.state.service = service

    app.middleware("http")(request_id_middleware)

    setup_exception_handlers(app)

    app.include_router(cheeses_router, prefix=cfg.app.api_prefix)
    app.include_router(users_router, prefix=cfg.app.api_prefix)
    app.include_router(health_router)

    apply_openapi_customizations(app)

    logger.info(
        "app.created",
        extra={"app_env": cfg.app_env, "api_prefix": cfg.app.api_prefix},
    )
    return app
