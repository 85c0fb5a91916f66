"""
Ошибки декодирования Decimal

Закрытый набор ошибок разбора денежной суммы из текста.
Каждая ошибка является отдельным классом с тегом DecimalErrorKind, поэтому
вызывающий код может различать их как по типу, так и по kind.

Кодирование (format) тотально и ошибок не порождает.
"""

from enum import Enum


class DecimalErrorKind(str, Enum):
    """Вид ошибки разбора"""

    MULTIPLE_DELIMITERS = "multiple_delimiters"
    INVALID_EXPONENT = "invalid_exponent"
    INVALID_FRACTION = "invalid_fraction"
    FRACTION_OUT_OF_RANGE = "fraction_out_of_range"
    EXPONENT_OUT_OF_RANGE = "exponent_out_of_range"


class DecimalError(ValueError):
    """
    Базовая ошибка разбора Decimal.

    Наследуется от ValueError, поэтому внутри pydantic-валидаторов
    превращается в ValidationError без дополнительной обработки.

    Attributes:
        text: Отклонённый входной текст
        kind: Вид ошибки
    """

    kind: DecimalErrorKind

    def __init__(self, text: str, message: str):
        super().__init__(f"{message}: {text!r}")
        self.text = text


class MultipleDelimitersError(DecimalError):
    """Во входе больше одной точки"""

    kind = DecimalErrorKind.MULTIPLE_DELIMITERS


class InvalidExponentError(DecimalError):
    """Целая часть не является знаковым целым"""

    kind = DecimalErrorKind.INVALID_EXPONENT


class InvalidFractionError(DecimalError):
    """Дробная часть не является беззнаковым целым"""

    kind = DecimalErrorKind.INVALID_FRACTION


class FractionOutOfRangeError(DecimalError):
    """Дробная часть вне [0, 99]"""

    kind = DecimalErrorKind.FRACTION_OUT_OF_RANGE


class ExponentOutOfRangeError(DecimalError):
    """Целая часть вне допустимого диапазона"""

    kind = DecimalErrorKind.EXPONENT_OUT_OF_RANGE
