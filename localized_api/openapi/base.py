"""Base infrastructure for the OpenAPI document pipeline.

This module defines the core components of the pipeline:
- TransformerContext: Immutable context handed to every transformer
- DocumentTransformer: Abstract base for document-level steps
- OperationTransformer: Abstract base for operation-level steps
- OpenApiPipeline: Driver that runs the steps over a generated document
"""

import dataclasses
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from fastapi.encoders import jsonable_encoder
from fastapi.openapi.models import OpenAPI, Operation, PathItem

logger = logging.getLogger("localized_api.openapi")

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


@dataclasses.dataclass(frozen=True)
class TransformerContext:
    """Where in the document a transformer is being invoked.

    Attributes:
        document_name: Name of the document being generated (e.g. "v1").
        path: Route path of the operation; None for document transformers.
        method: Lower-case HTTP method of the operation; None for document
            transformers.
    """

    document_name: str
    path: Optional[str] = None
    method: Optional[str] = None


class DocumentTransformer(ABC):
    """Base class for steps that run once per generated document.

    Transformers mutate the document in place and return nothing.
    """

    @abstractmethod
    def transform(self, document: OpenAPI, context: TransformerContext) -> None:
        pass

    @property
    def name(self) -> str:
        return self.__class__.__name__


class OperationTransformer(ABC):
    """Base class for steps that run once per documented operation.

    Transformers mutate the operation in place and return nothing.
    """

    @abstractmethod
    def transform(self, operation: Operation, context: TransformerContext) -> None:
        pass

    @property
    def name(self) -> str:
        return self.__class__.__name__


def iter_operations(document: OpenAPI) -> Iterator[Tuple[str, str, Operation]]:
    """Yield (path, method, operation) for every operation in the document.

    ``OpenAPI.paths`` values are typed ``PathItem | Any``, so entries that do
    not validate strictly (e.g. a parameter with ``"in": "query"``) stay plain
    dicts. Those are validated into ``PathItem`` and written back so changes
    made to the yielded operations end up in the document.
    """
    paths = document.paths or {}
    for path in list(paths):
        # specification extensions, not path items
        if path.startswith("x-"):
            continue
        item = paths[path]
        if not isinstance(item, PathItem):
            item = PathItem.model_validate(item)
            paths[path] = item
        for method in HTTP_METHODS:
            operation = getattr(item, method, None)
            if operation is not None:
                yield path, method, operation


class OpenApiPipeline:
    """Runs document transformers, then operation transformers, in order.

    Document transformers run once per document. Every operation transformer
    then runs once for every operation found under ``document.paths``.
    """

    def __init__(
        self,
        document_transformers: Sequence[DocumentTransformer] = (),
        operation_transformers: Sequence[OperationTransformer] = (),
    ) -> None:
        self.document_transformers: List[DocumentTransformer] = list(document_transformers)
        self.operation_transformers: List[OperationTransformer] = list(operation_transformers)

    def apply(self, document: OpenAPI, document_name: str = "v1") -> OpenAPI:
        """Mutate ``document`` in place and return it.

        Raises:
            Exception: whatever a failing transformer raised; the failing
                transformer is logged first.
        """
        context = TransformerContext(document_name=document_name)
        for transformer in self.document_transformers:
            logger.debug("Running document transformer %s", transformer.name)
            self._run(transformer, document, context)

        count = 0
        for path, method, operation in iter_operations(document):
            context = TransformerContext(document_name=document_name, path=path, method=method)
            for transformer in self.operation_transformers:
                self._run(transformer, operation, context)
            count += 1

        logger.debug(
            "Pipeline completed: %d document transformers, %d operation transformers over %d operations",
            len(self.document_transformers),
            len(self.operation_transformers),
            count,
        )
        return document

    def build(self, raw_document: Dict[str, Any], document_name: str = "v1") -> Dict[str, Any]:
        """Validate a raw OpenAPI dict, run the pipeline and encode it back to JSON-ready data."""
        document = OpenAPI.model_validate(raw_document)
        self.apply(document, document_name=document_name)
        return jsonable_encoder(document, by_alias=True, exclude_none=True)

    @staticmethod
    def _run(transformer: Any, target: Any, context: TransformerContext) -> None:
        try:
            transformer.transform(target, context)
        except Exception as e:
            where = f" at {context.method.upper()} {context.path}" if context.path else ""
            logger.error("Transformer %s failed%s: %s", transformer.name, where, e, exc_info=True)
            raise
