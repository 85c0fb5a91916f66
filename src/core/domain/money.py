"""
Decimal — Денежная сумма с фиксированной точкой

Знаковое 64-битное целое, хранящее количество сотых долей единицы
(центов для валюты с двумя знаками после запятой), и текстовый/JSON кодек
без потерь.

Разложение значения:
- exponent: целые единицы (value / 100 с усечением к нулю), со знаком
- fraction: |value % 100|, всегда в [0, 99]

Текстовая форма: ["-"] digits "." digit digit
JSON-форма совпадает с текстовой и не заключается в кавычки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. fraction всегда в [0, 99] независимо от знака значения
2. Знак значений из (-1, 0) берётся из текста, а не из exponent ("-0.99" -> -99)
3. parse(format(v)) == v для любого v в [MIN_VALUE, MAX_VALUE]
4. Разбор атомарен: либо новое значение, либо исключение
"""

import logging
import re
from typing import Any, Final, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from src.core.domain.errors import (
    DecimalError,
    ExponentOutOfRangeError,
    FractionOutOfRangeError,
    InvalidExponentError,
    InvalidFractionError,
    MultipleDelimitersError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Количество сотых в единице
SCALE: Final[int] = 100

# Максимальное значение дробной части
FRACTION_MAX: Final[int] = SCALE - 1

# Разделитель целой и дробной части
DELIMITER: Final[str] = "."

# Диапазон хранимого целого (int64)
INT64_MIN: Final[int] = -(1 << 63)
INT64_MAX: Final[int] = (1 << 63) - 1

# Границы exponent: exponent * 100 ± 99 не выходит за int64
EXPONENT_MAX: Final[int] = (1 << 63) // SCALE - 1  # 92233720368547757
EXPONENT_MIN: Final[int] = -EXPONENT_MAX

# Границы значения, которое можно разобрать из текста
MAX_VALUE: Final[int] = EXPONENT_MAX * SCALE + FRACTION_MAX  # 92233720368547757.99
MIN_VALUE: Final[int] = -MAX_VALUE

_EXPONENT_RE: Final = re.compile(r"[+-]?[0-9]+")
_FRACTION_RE: Final = re.compile(r"[0-9]+")


# =============================================================================
# КОДЕК
# =============================================================================


def format_decimal(value: int) -> str:
    """
    Кодирование количества сотых в каноническую текстовую форму.

    Тотальная функция: определена для любого int64. Минус выводится один раз
    перед целой частью, дробная часть выводится как модуль остатка с двумя цифрами.

    Args:
        value: Количество сотых (может быть отрицательным)

    Returns:
        Текст вида "-0.99", "0.00", "99.99"

    Examples:
        >>> format_decimal(-99)
        '-0.99'
        >>> format_decimal(9999)
        '99.99'
    """
    sign = "-" if value < 0 else ""
    magnitude = abs(int(value))
    return f"{sign}{magnitude // SCALE}.{magnitude % SCALE:02d}"


def _parse_int(text: str, pattern: "re.Pattern[str]") -> int:
    if pattern.fullmatch(text) is None:
        raise ValueError(f"invalid syntax: {text!r}")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"value out of int64 range: {text!r}")
    return value


def _parse_json_value(value: Any) -> "Decimal":
    # Строка приходит как есть, число приходит из decimal_schema с исходными цифрами
    if isinstance(value, str):
        return parse_decimal(value)
    return parse_decimal(str(value))


def _parse_hundredths(text: str) -> int:
    parts = text.split(DELIMITER)
    if len(parts) > 2:
        raise MultipleDelimitersError(text, "number must be delimited by one point only")

    exponent_text = parts[0]
    try:
        exponent = _parse_int(exponent_text, _EXPONENT_RE)
    except ValueError as e:
        raise InvalidExponentError(text, "exponent is not a signed integer") from e

    frac = 0
    if len(parts) == 2:
        try:
            frac = _parse_int(parts[1], _FRACTION_RE)
        except ValueError as e:
            raise InvalidFractionError(text, "fraction is not an unsigned integer") from e
        if frac > FRACTION_MAX:
            raise FractionOutOfRangeError(text, f"fraction must be between 0 and {FRACTION_MAX}")

    if not EXPONENT_MIN <= exponent <= EXPONENT_MAX:
        raise ExponentOutOfRangeError(
            text, f"exponent must be between {EXPONENT_MIN} and {EXPONENT_MAX}"
        )

    # int("-0") == 0: знак нулевой целой части виден только в тексте
    if exponent < 0 or exponent == 0 and exponent_text.startswith("-"):
        return exponent * SCALE - frac
    return exponent * SCALE + frac


def parse_decimal(text: Union[str, bytes]) -> "Decimal":
    """
    Разбор денежной суммы из текста.

    Принимает ["-"|"+"] digits ["." digits]. Дробная часть читается как целое
    число: "99.9" означает 99 единиц и 9 сотых (9909), а не 99.90.

    Args:
        text: Текст (str или UTF-8 bytes)

    Returns:
        Новый Decimal

    Raises:
        MultipleDelimitersError: Больше одной точки
        InvalidExponentError: Целая часть не знаковое целое int64
        InvalidFractionError: Дробная часть не беззнаковое целое int64
        FractionOutOfRangeError: Дробная часть больше 99
        ExponentOutOfRangeError: Целая часть вне [EXPONENT_MIN, EXPONENT_MAX]
    """
    if isinstance(text, (bytes, bytearray)):
        # Невалидный UTF-8 не проходит регулярные выражения и даёт ошибку нужного вида
        text = bytes(text).decode("utf-8", "surrogateescape")

    try:
        hundredths = _parse_hundredths(text)
    except DecimalError as e:
        logger.debug("decimal rejected (%s): %r", e.kind.value, text)
        raise

    return Decimal(hundredths)


# =============================================================================
# DECIMAL
# =============================================================================


class Decimal(int):
    """
    Денежная сумма: целое количество сотых.

    Подкласс int: сравнивается и хэшируется как количество сотых
    (Decimal.parse("99") == 9900), копируется по значению, неизменяем.
    Арифметика не переопределена и возвращает обычный int.

    Интегрируется с pydantic: поле типа Decimal принимает Decimal или его
    текстовую форму, из JSON также голое число без потери цифр. В JSON-режиме
    pydantic сериализует его в каноническую строку; голый токен даёт to_json().
    """

    __slots__ = ()

    def __new__(cls, value: int = 0) -> "Decimal":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"Decimal expects an int count of hundredths, got {type(value).__name__}; "
                "use Decimal.parse() for text"
            )
        if not INT64_MIN <= value <= INT64_MAX:
            raise OverflowError(f"Decimal value {value} does not fit into int64")
        return super().__new__(cls, value)

    @classmethod
    def parse(cls, text: Union[str, bytes]) -> "Decimal":
        """Разбор из текстовой формы (см. parse_decimal)"""
        return parse_decimal(text)

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "Decimal":
        """
        Разбор из JSON-токена.

        Токен является голым числом, поэтому строка в кавычках отклоняется
        (InvalidExponentError). Подходит как hook для json.loads; parse_int
        обязателен, иначе целый токен 99 останется int 99, а не 99.00:

            json.loads(body, parse_float=Decimal.from_json, parse_int=Decimal.from_json)
        """
        return parse_decimal(data)

    @property
    def exponent(self) -> int:
        """Целые единицы со знаком (усечение к нулю)"""
        units = abs(int(self)) // SCALE
        return -units if self < 0 else units

    @property
    def fraction(self) -> int:
        """Сотые доли без знака, [0, 99]"""
        return abs(int(self)) % SCALE

    def to_text(self) -> str:
        return format_decimal(self)

    def to_json(self) -> str:
        return format_decimal(self)

    def __str__(self) -> str:
        return format_decimal(self)

    def __repr__(self) -> str:
        return f"Decimal('{format_decimal(self)}')"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_text = core_schema.chain_schema(
            [
                core_schema.str_schema(strict=True),
                core_schema.no_info_plain_validator_function(parse_decimal),
            ]
        )
        # Строка точно совпадает с str_schema и не доходит до decimal_schema
        from_json_value = core_schema.chain_schema(
            [
                core_schema.union_schema(
                    [core_schema.str_schema(strict=True), core_schema.decimal_schema()]
                ),
                core_schema.no_info_plain_validator_function(_parse_json_value),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_json_value,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_text]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                format_decimal, when_used="json"
            ),
        )
