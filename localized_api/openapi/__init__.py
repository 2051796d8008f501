from localized_api.openapi.base import (
    DocumentTransformer,
    OpenApiPipeline,
    OperationTransformer,
    TransformerContext,
    iter_operations,
)
from localized_api.openapi.document import DocumentMetadataTransformer
from localized_api.openapi.factory import OpenApiPipelineFactory, install_openapi
from localized_api.openapi.operation import ACCEPT_LANGUAGE, AcceptLanguageHeaderTransformer

__all__ = [
    "ACCEPT_LANGUAGE",
    "AcceptLanguageHeaderTransformer",
    "DocumentMetadataTransformer",
    "DocumentTransformer",
    "OpenApiPipeline",
    "OpenApiPipelineFactory",
    "OperationTransformer",
    "TransformerContext",
    "install_openapi",
    "iter_operations",
]
