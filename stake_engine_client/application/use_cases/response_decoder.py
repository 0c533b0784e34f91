"""レスポンスのデコード."""
from collections.abc import Callable
from typing import Any, TypeVar

from stake_engine_client.domain.ports import RgsResponseError

T = TypeVar("T")


def decode_response(decoder: Callable[[Any], T], data: Any) -> T:
    """受信したJSONを値オブジェクトに変換する.

    Raises:
        RgsResponseError: ボディが想定した形式でない場合
    """
    try:
        return decoder(data)
    except ValueError as e:
        raise RgsResponseError(f"Unexpected RGS response: {e}") from e
