"""Accept-Language header injector.

Advertises an optional ``Accept-Language`` header on every operation, with
the supported cultures as the allowed values.
"""

from typing import Iterable, Tuple

from fastapi.openapi.models import Operation, Parameter, ParameterInType, Schema

from localized_api.openapi.base import OperationTransformer, TransformerContext

ACCEPT_LANGUAGE = "Accept-Language"


class AcceptLanguageHeaderTransformer(OperationTransformer):
    """Appends the ``Accept-Language`` header parameter to an operation.

    The enum values are computed once here and shared by every operation of
    every generation pass. An operation that already declares the header
    (same name, header location) is left untouched, so the transformer can
    run any number of times.
    """

    def __init__(self, supported_cultures: Iterable[str]) -> None:
        self.supported_languages: Tuple[str, ...] = tuple(supported_cultures)

    def transform(self, operation: Operation, context: TransformerContext) -> None:
        if not self.supported_languages:
            return

        if operation.parameters is None:
            operation.parameters = []

        if any(self._is_accept_language(p) for p in operation.parameters):
            return

        operation.parameters.append(self.build_parameter())

    def build_parameter(self) -> Parameter:
        return Parameter.model_validate(
            {
                "name": ACCEPT_LANGUAGE,
                "in": ParameterInType.header,
                "required": False,
                "schema": Schema(
                    type="string",
                    enum=list(self.supported_languages),
                    default=self.supported_languages[0],
                ),
            }
        )

    @staticmethod
    def _is_accept_language(parameter) -> bool:
        # $ref entries carry no name/location
        if not isinstance(parameter, Parameter):
            return False
        return parameter.name == ACCEPT_LANGUAGE and parameter.in_ == ParameterInType.header
