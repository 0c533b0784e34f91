"""ドメイン層モジュール."""
from .enums import StatusCode
from .ports import ContextProvider, RgsApiError, RgsGateway, RgsGatewayError, RgsResponseError
from .services import (
    API_AMOUNT_MULTIPLIER,
    BOOK_AMOUNT_MULTIPLIER,
    AmountConversionError,
    MissingParameterError,
    MissingServerError,
    MissingSessionError,
    ParameterResolver,
    to_api_amount,
)
from .value_objects import (
    AmbientContext,
    OperationContext,
    ReplayParams,
    SearchFilter,
)

__all__ = [
    # Enums
    "StatusCode",
    # Value Objects
    "AmbientContext",
    "OperationContext",
    "ReplayParams",
    "SearchFilter",
    # Ports
    "ContextProvider",
    "RgsApiError",
    "RgsGateway",
    "RgsGatewayError",
    "RgsResponseError",
    # Services
    "API_AMOUNT_MULTIPLIER",
    "BOOK_AMOUNT_MULTIPLIER",
    "AmountConversionError",
    "MissingParameterError",
    "MissingServerError",
    "MissingSessionError",
    "ParameterResolver",
    "to_api_amount",
]
