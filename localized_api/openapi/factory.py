"""OpenAPI pipeline factory and application wiring."""

import logging
from typing import Any, Callable, Dict, Sequence

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from localized_api.core.config import Settings
from localized_api.openapi.base import DocumentTransformer, OpenApiPipeline, OperationTransformer
from localized_api.openapi.document import DocumentMetadataTransformer
from localized_api.openapi.operation import AcceptLanguageHeaderTransformer

logger = logging.getLogger("localized_api.openapi")


class OpenApiPipelineFactory:
    """Builds OpenAPI pipelines."""

    @staticmethod
    def create_default(settings: Settings) -> OpenApiPipeline:
        """Metadata rewrite, then the Accept-Language header on every operation."""
        return OpenApiPipeline(
            document_transformers=[DocumentMetadataTransformer.from_settings(settings)],
            operation_transformers=[AcceptLanguageHeaderTransformer(settings.supported_cultures)],
        )

    @staticmethod
    def create_custom(
        document_transformers: Sequence[DocumentTransformer] = (),
        operation_transformers: Sequence[OperationTransformer] = (),
    ) -> OpenApiPipeline:
        return OpenApiPipeline(document_transformers, operation_transformers)


def install_openapi(
    app: FastAPI, pipeline: OpenApiPipeline, document_name: str = "v1"
) -> Callable[[], Dict[str, Any]]:
    """Replace ``app.openapi`` so the served document goes through ``pipeline``.

    The document is generated on first request and cached on
    ``app.openapi_schema``, like FastAPI's own implementation.
    """

    def openapi() -> Dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema
        raw = get_openapi(
            title=app.title,
            version=app.version,
            openapi_version=app.openapi_version,
            summary=app.summary,
            description=app.description,
            routes=app.routes,
            tags=app.openapi_tags,
            servers=app.servers,
        )
        app.openapi_schema = pipeline.build(raw, document_name=document_name)
        logger.info(
            "Generated OpenAPI document %s with %d paths",
            document_name,
            len(app.openapi_schema.get("paths", {})),
        )
        return app.openapi_schema

    app.openapi = openapi
    return openapi
