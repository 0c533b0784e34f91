"""ドメインサービスモジュール."""
from .amount_converter import (
    API_AMOUNT_MULTIPLIER,
    BOOK_AMOUNT_MULTIPLIER,
    AmountConversionError,
    to_api_amount,
)
from .parameter_resolver import (
    MissingParameterError,
    MissingServerError,
    MissingSessionError,
    ParameterResolver,
)

__all__ = [
    "API_AMOUNT_MULTIPLIER",
    "BOOK_AMOUNT_MULTIPLIER",
    "AmountConversionError",
    "MissingParameterError",
    "MissingServerError",
    "MissingSessionError",
    "ParameterResolver",
    "to_api_amount",
]
