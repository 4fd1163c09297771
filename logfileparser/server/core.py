"""Application factory for creating Litestar app instance."""

from __future__ import annotations


from litestar import Litestar
from litestar.di import Provide
from litestar.openapi import OpenAPIConfig
from litestar.middleware.logging import LoggingMiddlewareConfig

from logfileparser.config.settings import get_settings
from logfileparser.server import plugins
from logfileparser.server.lifecycle import on_startup, on_shutdown
from logfileparser.server.routes import get_route_handlers
from logfileparser.api.dependencies import provide_limit_offset_pagination


def create_app() -> Litestar:
    """Create and configure the Litestar application.

    This factory function loads configuration and initializes the app
    with settings for OpenAPI, dependency injection and logging.

    Returns:
        Litestar: Configured application instance
    """
    settings = get_settings()

    openapi_config = OpenAPIConfig(
        title=settings.name,
        version=settings.version,
        description=settings.description,
        create_examples=True,
    )

    logging_middleware_config = LoggingMiddlewareConfig()

    app = Litestar(
        debug=settings.debug,
        route_handlers=get_route_handlers(),
        on_startup=[on_startup],
        on_shutdown=[on_shutdown],
        dependencies={
            "limit_offset": Provide(provide_limit_offset_pagination, sync_to_thread=False),
        },
        logging_config=plugins.logging_config,
        openapi_config=openapi_config,
        middleware=[logging_middleware_config.middleware],
    )

    return app
