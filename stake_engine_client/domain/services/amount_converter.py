"""賭け金の単位変換.

RGS API は金額を通貨単位の 1,000,000 倍の整数で扱う。
逆変換は提供しない。表示する側で API_AMOUNT_MULTIPLIER で割ること。

通貨ごとの補助単位（小数桁数）の違いは考慮しない。
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation

# ライブAPIの金額単位
API_AMOUNT_MULTIPLIER = 1_000_000
# ブック（過去の結果レコード）の金額単位。API単位と混同しないこと
BOOK_AMOUNT_MULTIPLIER = 100


class AmountConversionError(ValueError):
    """金額をAPI単位に変換できないエラー."""

    pass


def to_api_amount(amount: int | float | Decimal) -> int:
    """表示用の金額（例: 1.00）をAPI単位の整数に変換する.

    丸めは行わない。API単位で整数にならない金額はエラーとする。

    Raises:
        AmountConversionError: 負数・非有限値・整数にならない金額の場合
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise AmountConversionError(f"Invalid amount: {amount!r}")
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation as e:
        raise AmountConversionError(f"Invalid amount: {amount!r}") from e
    if not value.is_finite():
        raise AmountConversionError(f"Amount must be finite: {amount!r}")
    if value < 0:
        raise AmountConversionError(f"Amount cannot be negative: {amount!r}")

    api_amount = value * API_AMOUNT_MULTIPLIER
    if api_amount != api_amount.to_integral_value():
        raise AmountConversionError(
            f"Amount {amount!r} is not representable in API units "
            f"(1/{API_AMOUNT_MULTIPLIER:,})"
        )
    return int(api_amount)
