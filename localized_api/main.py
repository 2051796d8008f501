import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from localized_api.core.config import Settings, settings as default_settings
from localized_api.openapi import OpenApiPipelineFactory, install_openapi
from localized_api.router.base_route import router as api_router
from localized_api.services.localization import CultureNegotiator, install_localization

logger = logging.getLogger("localized_api.main")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        openapi_url=settings.OPENAPI_URL,
        docs_url=settings.DOCS_URL,
        redoc_url=None,
    )

    if settings.supported_cultures:
        install_localization(app, CultureNegotiator(settings.supported_cultures))
    else:
        logger.warning("No supported cultures configured; request localization disabled")

    # Added last so it runs first
    if settings.HTTPS_REDIRECT:
        app.add_middleware(HTTPSRedirectMiddleware)

    app.include_router(api_router)

    @app.get("/health", include_in_schema=False)
    def health():
        return {"status": "ok", "service": settings.APP_NAME}

    install_openapi(app, OpenApiPipelineFactory.create_default(settings), document_name=settings.APP_VERSION)
    logger.info(
        "Application %s ready: openapi=%s docs=%s cultures=%s",
        settings.APP_NAME,
        settings.OPENAPI_URL,
        settings.DOCS_URL,
        list(settings.supported_cultures),
    )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("localized_api.main:app", host=default_settings.APP_HOST, port=default_settings.APP_PORT)
