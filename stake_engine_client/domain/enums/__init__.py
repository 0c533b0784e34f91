"""列挙型モジュール."""
from .status_code import StatusCode

__all__ = [
    "StatusCode",
]
