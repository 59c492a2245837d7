"""
Arithmetic: знаковые операции над DecimalValue

Модуль реализует сложение, вычитание, умножение и сравнение знаковых
десятичных чисел поверх беззнаковых примитивов digits:
- add: одинаковые знаки → сложение модулей, разные → вычитание
- subtract: разные знаки → сложение с -b, одинаковые → вычитание модулей
  с дополнением до десяти при |a| < |b|
- multiply: знак = XOR, модуль через выбранную стратегию
- compare: Ordering.LESS / EQUAL / GREATER

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Оба операнда канонизируются до любых действий
2. Результат всегда в канонической форме, -0 не существует
3. Операции тотальны: на валидных DecimalValue никогда не бросают
4. Операнды не изменяются (DecimalValue frozen, цифры в tuple)
"""

from dataclasses import dataclass
from enum import Enum

from src.decimal_core.domain.decimal_value import DecimalValue
from src.decimal_core.math.digits import (
    Magnitude,
    add_magnitudes,
    compare_magnitudes,
    multiply_by_repeated_addition,
    multiply_schoolbook,
    subtract_magnitudes,
)

# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Результат сравнения двух значений"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class MultiplicationStrategy(str, Enum):
    """Алгоритм умножения модулей"""

    # Эталон: повторное сложение со сдвигами (до 9 сложений на цифру)
    REPEATED_ADDITION = "repeated_addition"
    # Столбиком: произведения цифр с переносом, O(n·m)
    SCHOOLBOOK = "schoolbook"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ArithmeticConfig:
    """Конфигурация арифметики.

    Обе стратегии умножения дают одинаковый результат после канонизации.
    """

    multiplication_strategy: MultiplicationStrategy = MultiplicationStrategy.REPEATED_ADDITION


# =============================================================================
# ARITHMETIC ENGINE
# =============================================================================


class DecimalArithmetic:
    """Знаковая арифметика DecimalValue с настраиваемой стратегией умножения."""

    def __init__(self, config: ArithmeticConfig | None = None):
        """Инициализация.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or ArithmeticConfig()

    def add(self, a: DecimalValue, b: DecimalValue) -> DecimalValue:
        """
        Сложение a + b.

        При разных знаках сводится к вычитанию:
        - a отрицательное: b - |a|
        - b отрицательное: a - |b|

        При одинаковых знаках складываются модули, знак общий.
        """
        a = a.simplify()
        b = b.simplify()

        if a.sign != b.sign:
            if a.sign:
                return self.subtract(b, absolute(a))
            return self.subtract(a, absolute(b))

        return DecimalValue.from_magnitude(
            a.sign, add_magnitudes(a.magnitude, b.magnitude)
        ).simplify()

    def subtract(self, a: DecimalValue, b: DecimalValue) -> DecimalValue:
        """
        Вычитание a - b.

        При разных знаках сводится к a + (-b). При одинаковых знаках
        вычитаются модули; если |a| < |b|, знак результата инвертируется.
        """
        a = a.simplify()
        b = b.simplify()

        if a.sign != b.sign:
            return self.add(a, negate(b))

        magnitude, borrowed = subtract_magnitudes(a.magnitude, b.magnitude)
        return DecimalValue.from_magnitude(a.sign != borrowed, magnitude).simplify()

    def multiply(self, a: DecimalValue, b: DecimalValue) -> DecimalValue:
        """
        Умножение a * b.

        Знак результата = a.sign XOR b.sign; модуль вычисляется стратегией
        из config.multiplication_strategy.
        """
        a = a.simplify()
        b = b.simplify()

        magnitude = self._multiply_magnitudes(a.magnitude, b.magnitude)
        return DecimalValue.from_magnitude(a.sign != b.sign, magnitude).simplify()

    def _multiply_magnitudes(self, a: Magnitude, b: Magnitude) -> Magnitude:
        strategy = self.config.multiplication_strategy
        if strategy is MultiplicationStrategy.SCHOOLBOOK:
            return multiply_schoolbook(a, b)
        return multiply_by_repeated_addition(a, b)

    def compare(self, a: DecimalValue, b: DecimalValue) -> Ordering:
        """
        Сравнение a и b.

        Порядок проверок (на канонических формах):
        1. Разные знаки → отрицательное меньше (-0 невозможен)
        2. Одинаковые знаки → сравнение модулей, инвертированное для
           отрицательных чисел

        Example: compare(-0.01, -0.1) → GREATER
        """
        a = a.simplify()
        b = b.simplify()

        if a.sign != b.sign:
            return Ordering.LESS if a.sign else Ordering.GREATER

        order = compare_magnitudes(a.magnitude, b.magnitude)
        if a.sign:
            order = -order
        return Ordering(order)

    def equals(self, a: DecimalValue, b: DecimalValue) -> bool:
        return a.canonical_key() == b.canonical_key()


# =============================================================================
# SIGN HELPERS
# =============================================================================


def negate(value: DecimalValue) -> DecimalValue:
    """Смена знака; ноль остаётся неотрицательным"""
    simplified = value.simplify()
    if simplified.is_zero():
        return simplified
    return simplified.model_copy(update={"sign": not simplified.sign})


def absolute(value: DecimalValue) -> DecimalValue:
    """Модуль значения в канонической форме"""
    return value.simplify().model_copy(update={"sign": False})


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Глобальный экземпляр с конфигурацией по умолчанию
_DEFAULT_ARITHMETIC = DecimalArithmetic()


def add(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """a + b"""
    return _DEFAULT_ARITHMETIC.add(a, b)


def subtract(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """a - b"""
    return _DEFAULT_ARITHMETIC.subtract(a, b)


def multiply(a: DecimalValue, b: DecimalValue) -> DecimalValue:
    """a * b (повторное сложение со сдвигами)"""
    return _DEFAULT_ARITHMETIC.multiply(a, b)


def compare(a: DecimalValue, b: DecimalValue) -> Ordering:
    return _DEFAULT_ARITHMETIC.compare(a, b)


def equals(a: DecimalValue, b: DecimalValue) -> bool:
    return _DEFAULT_ARITHMETIC.equals(a, b)
