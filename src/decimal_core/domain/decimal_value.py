"""
DecimalValue: знаковое десятичное число произвольной точности

Immutable Pydantic модель: знак + цифры целой части + цифры дробной части.
Цифры хранятся как tuple, старшая первой.

Сырые поля могут быть неканоническими ("1.50", "0001"), поэтому
равенство, порядок и hash определены только через simplify():
"1.50" == "1.5", "-0.0" == "0.0".

Создание:
- parse(text) → DecimalValue | None, ошибка формата не исключение
- DecimalValue.from_string(text) → DecimalValue или DecimalParseError
- результат арифметической операции
"""

import logging
from enum import Enum
from typing import Final, Optional

from pydantic import BaseModel, Field, field_validator

from src.decimal_core.math.digits import (
    DIGIT_BASE,
    Magnitude,
    is_zero_magnitude,
    shift_left,
    shift_right,
    strip_magnitude,
)

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ ФОРМАТА
# =============================================================================

DECIMAL_POINT: Final[str] = "."
NEGATIVE_SIGN: Final[str] = "-"
POSITIVE_SIGN: Final[str] = "+"

# Только ASCII цифры; str.isdigit() пропускает unicode-цифры
ASCII_DIGITS: Final[str] = "0123456789"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseFailureReason(str, Enum):
    """Причина отказа парсинга текстового литерала"""

    EMPTY = "empty"
    INVALID_LEADING_CHARACTER = "invalid_leading_character"
    MULTIPLE_DECIMAL_POINTS = "multiple_decimal_points"
    INVALID_CHARACTER = "invalid_character"


class DecimalParseError(ValueError):
    """
    Текст не является десятичным литералом.

    Грамматика: [+|-] digits [. digits], не более одной точки.

    Attributes:
        reason: Причина отказа
        text: Исходный текст
        position: Индекс проблемного символа (None для пустой строки)
    """

    def __init__(self, reason: ParseFailureReason, text: str, position: Optional[int] = None):
        self.reason = reason
        self.text = text
        self.position = position
        if position is None:
            message = f"Invalid decimal literal {text!r}: {reason.value}"
        else:
            message = (
                f"Invalid decimal literal {text!r}: {reason.value} "
                f"{text[position]!r} at position {position}"
            )
        super().__init__(message)


# =============================================================================
# DECIMAL VALUE MODEL
# =============================================================================


class DecimalValue(BaseModel):
    """
    Знаковое десятичное число произвольной точности.

    Immutable модель (frozen=True): операции всегда возвращают новый
    экземпляр, операнды не изменяются.
    """

    sign: bool = Field(default=False, description="True = отрицательное число")
    integer_digits: tuple[int, ...] = Field(
        default=(0,), min_length=1, description="Цифры целой части (MSB-first)"
    )
    fractional_digits: tuple[int, ...] = Field(
        default=(0,), min_length=1, description="Цифры дробной части после точки"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("integer_digits", "fractional_digits")
    @classmethod
    def validate_digit_range(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждый элемент должен быть десятичной цифрой 0..9."""
        for digit in v:
            if not 0 <= digit < DIGIT_BASE:
                raise ValueError(f"digit {digit} out of range 0..{DIGIT_BASE - 1}")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_magnitude(cls, sign: bool, magnitude: Magnitude) -> "DecimalValue":
        return cls(
            sign=sign,
            integer_digits=magnitude.integer,
            fractional_digits=magnitude.fractional,
        )

    @classmethod
    def from_string(cls, text: str) -> "DecimalValue":
        """
        Парсинг текстового литерала.

        Правила:
        - Опциональный ведущий '+' или '-'
        - Далее только цифры 0-9 и не более одной '.'
        - Пустая целая часть → (0,), пустая дробная часть → (0,)
        - Канонизация НЕ выполняется ("007.50" сохраняет все цифры)

        Args:
            text: Литерал, например "-12.034"

        Returns:
            DecimalValue

        Raises:
            DecimalParseError: Пустая строка, недопустимый первый символ,
                вторая точка или символ вне [0-9.]

        Examples:
            >>> DecimalValue.from_string("-1.5").fractional_digits
            (5,)
            >>> DecimalValue.from_string(".5")  # doctest: +SKIP
            Traceback (most recent call last):
                ...
            DecimalParseError: ...
        """
        if not text:
            raise DecimalParseError(ParseFailureReason.EMPTY, text)

        first = text[0]
        if first in (NEGATIVE_SIGN, POSITIVE_SIGN):
            sign = first == NEGATIVE_SIGN
            start = 1
        elif first in ASCII_DIGITS:
            sign = False
            start = 0
        else:
            raise DecimalParseError(ParseFailureReason.INVALID_LEADING_CHARACTER, text, 0)

        integer: list[int] = []
        fractional: list[int] = []
        in_fraction = False

        for position in range(start, len(text)):
            char = text[position]
            if char == DECIMAL_POINT:
                if in_fraction:
                    raise DecimalParseError(
                        ParseFailureReason.MULTIPLE_DECIMAL_POINTS, text, position
                    )
                in_fraction = True
            elif char in ASCII_DIGITS:
                target = fractional if in_fraction else integer
                target.append(ord(char) - ord("0"))
            else:
                raise DecimalParseError(ParseFailureReason.INVALID_CHARACTER, text, position)

        return cls(
            sign=sign,
            integer_digits=tuple(integer) or (0,),
            fractional_digits=tuple(fractional) or (0,),
        )

    # -------------------------------------------------------------------------
    # Канонизация и сдвиги
    # -------------------------------------------------------------------------

    @property
    def magnitude(self) -> Magnitude:
        """Беззнаковый модуль (сырые цифры, без канонизации)"""
        return Magnitude(self.integer_digits, self.fractional_digits)

    def simplify(self) -> "DecimalValue":
        """
        Каноническая форма.

        Удаляет ведущие нули целой части и хвостовые нули дробной части
        (минимум одна цифра в каждой). Отрицательный ноль → положительный.
        """
        magnitude = strip_magnitude(self.magnitude)
        return DecimalValue.from_magnitude(
            self.sign and not is_zero_magnitude(magnitude), magnitude
        )

    def canonical_key(self) -> tuple[bool, tuple[int, ...], tuple[int, ...]]:
        """Ключ канонической формы: основа __eq__ и __hash__"""
        simplified = self.simplify()
        return simplified.sign, simplified.integer_digits, simplified.fractional_digits

    def is_zero(self) -> bool:
        return is_zero_magnitude(self.magnitude)

    def shift_left(self, places: int) -> "DecimalValue":
        """Умножение на 10^places; знак сохраняется"""
        return DecimalValue.from_magnitude(self.sign, shift_left(self.magnitude, places))

    def shift_right(self, places: int) -> "DecimalValue":
        """Деление на 10^places; знак сохраняется"""
        return DecimalValue.from_magnitude(self.sign, shift_right(self.magnitude, places))

    # -------------------------------------------------------------------------
    # Равенство и порядок (через каноническую форму)
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return self.canonical_key() == other.canonical_key()

    def __hash__(self) -> int:
        return hash(self.canonical_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        from src.decimal_core.math.arithmetic import Ordering, compare

        return compare(self, other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        from src.decimal_core.math.arithmetic import Ordering, compare

        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        from src.decimal_core.math.arithmetic import Ordering, compare

        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        from src.decimal_core.math.arithmetic import Ordering, compare

        return compare(self, other) is not Ordering.LESS

    # -------------------------------------------------------------------------
    # Арифметические операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "DecimalValue":
        if not isinstance(other, DecimalValue):
            return NotImplemented
        from src.decimal_core.math.arithmetic import add

        return add(self, other)

    def __sub__(self, other: object) -> "DecimalValue":
        if not isinstance(other, DecimalValue):
            return NotImplemented
        from src.decimal_core.math.arithmetic import subtract

        return subtract(self, other)

    def __mul__(self, other: object) -> "DecimalValue":
        if not isinstance(other, DecimalValue):
            return NotImplemented
        from src.decimal_core.math.arithmetic import multiply

        return multiply(self, other)

    def __neg__(self) -> "DecimalValue":
        from src.decimal_core.math.arithmetic import negate

        return negate(self)

    def __abs__(self) -> "DecimalValue":
        from src.decimal_core.math.arithmetic import absolute

        return absolute(self)

    def __str__(self) -> str:
        """
        Каноническая запись: "-12.5", "3", "0.007".

        Дробная часть ровно (0,) не выводится.
        """
        simplified = self.simplify()
        text = "".join(str(d) for d in simplified.integer_digits)
        if simplified.fractional_digits != (0,):
            text += DECIMAL_POINT + "".join(str(d) for d in simplified.fractional_digits)
        return NEGATIVE_SIGN + text if simplified.sign else text


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def parse(text: str) -> Optional[DecimalValue]:
    """
    Парсинг литерала без exception.

    Ошибка формата не исключение: возвращается None и пишется DEBUG-лог.

    Examples:
        >>> parse("1.5") == parse("1.50")
        True
        >>> parse("1.2.3") is None
        True
    """
    try:
        return DecimalValue.from_string(text)
    except DecimalParseError as e:
        logger.debug("Rejected decimal literal %r (%s)", text, e.reason.value)
        return None


def decimal(text: str) -> DecimalValue:
    """
    DecimalValue из литерала, который заведомо валиден.

    Raises:
        DecimalParseError: Если литерал всё-таки невалиден
    """
    return DecimalValue.from_string(text)
