"""Demo application entrypoint and composition."""

from fastapi import FastAPI

from flashembed.config import get_settings
from flashembed.errors import register_exception_handlers
from flashembed.logging import configure_logging
from flashembed.middleware import install_middlewares
from flashembed.routes import home, infra

configure_logging()


def create_app(*, force_debug: bool | None = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    force_debug:
        - None: use settings.debug.
        - True: enable debug mode.
        - False: force non-debug mode (for 500.html testing).
    """
    # Clear cached settings to ensure fresh config on app creation (tests with monkeypatch)
    get_settings.cache_clear()
    settings = get_settings()

    debug = settings.debug if force_debug is None else bool(force_debug)
    app = FastAPI(title=settings.app_name, debug=debug)

    install_middlewares(app)

    app.include_router(infra.router)
    app.include_router(home.router)

    register_exception_handlers(app)

    return app


app = create_app()
