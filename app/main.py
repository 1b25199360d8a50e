"""
Application entry point.

This module follows SRP by only serving as the application entry point.
All configuration, middleware, and lifecycle management is delegated
to specialized modules.
"""

import logging

import sentry_sdk

from app.config.settings import get_settings
from app.core.app_factory import create_app
from app.core.shared.logger import configure_logging
from app.core.shared.network import get_local_ip

settings = get_settings()

configure_logging(
    level=settings.LOG_LEVEL,
    format_type=settings.LOG_FORMAT,
    log_dir=settings.LOG_DIR,
)

logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        send_default_pii=False,
        environment=settings.ENVIRONMENT,
    )

# Create application using factory
app = create_app(settings)


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    host = settings.SERVER_HOST or get_local_ip()
    scheme = "https" if settings.ENABLE_HTTPS else "http"
    logger.info(f"Starting application in {settings.ENVIRONMENT} mode on {scheme}://{host}:{settings.SERVER_PORT}")

    uvicorn.run(
        "app.main:app",
        host=host,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG,
        log_config=None,
        ssl_keyfile=settings.SSL_PRIVATE_KEY_PATH if settings.ENABLE_HTTPS else None,
        ssl_certfile=settings.SSL_PUBLIC_CERT_PATH if settings.ENABLE_HTTPS else None,
    )


if __name__ == "__main__":
    run()
