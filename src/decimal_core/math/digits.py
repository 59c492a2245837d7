"""
Digit Vectors: примитивы над десятичными цифрами

Модуль содержит беззнаковые операции над модулем (magnitude) числа,
представленным двумя последовательностями десятичных цифр:
- integer: целая часть, старшая цифра первой
- fractional: дробная часть в порядке чтения после точки

Все функции чистые: принимают tuple, возвращают новый Magnitude.
Знак числа здесь не обрабатывается, это задача arithmetic.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая цифра в диапазоне 0..9
2. Ни integer, ни fractional никогда не бывают пустыми (минимум (0,))
3. Порядок цифр всегда MSB-first; перенос/заём идут с конца к началу
4. Результаты add/subtract/multiply возвращаются в канонической форме
"""

from typing import Final, NamedTuple

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления
DIGIT_BASE: Final[int] = 10

# Максимальная цифра разряда
MAX_DIGIT: Final[int] = DIGIT_BASE - 1


# =============================================================================
# MAGNITUDE
# =============================================================================


class Magnitude(NamedTuple):
    """Модуль десятичного числа: целые и дробные цифры (MSB-first)."""

    integer: tuple[int, ...]
    fractional: tuple[int, ...]


ZERO_MAGNITUDE: Final[Magnitude] = Magnitude((0,), (0,))


def strip_magnitude(value: Magnitude) -> Magnitude:
    """
    Каноническая форма модуля.

    Удаляет ведущие нули целой части и хвостовые нули дробной части,
    оставляя в каждой последовательности минимум одну цифру.

    Examples:
        >>> strip_magnitude(Magnitude((0, 0, 1), (5, 0)))
        Magnitude(integer=(1,), fractional=(5,))
        >>> strip_magnitude(Magnitude((0, 0), (0, 0)))
        Magnitude(integer=(0,), fractional=(0,))
    """
    first = 0
    while first < len(value.integer) - 1 and value.integer[first] == 0:
        first += 1

    last = len(value.fractional) - 1
    while last > 0 and value.fractional[last] == 0:
        last -= 1

    return Magnitude(value.integer[first:], value.fractional[: last + 1])


def is_zero_magnitude(value: Magnitude) -> bool:
    """True если все цифры модуля нулевые."""
    return not any(value.integer) and not any(value.fractional)


def pad_magnitude(value: Magnitude, integer_width: int, fractional_width: int) -> Magnitude:
    """
    Выравнивание модуля до заданной ширины.

    Целая часть дополняется нулями слева, дробная справа.
    Значение модуля не меняется.

    Raises:
        ValueError: Если ширина меньше текущей длины последовательности
    """
    if integer_width < len(value.integer) or fractional_width < len(value.fractional):
        raise ValueError(
            f"Cannot pad {len(value.integer)}.{len(value.fractional)} digits "
            f"to narrower width {integer_width}.{fractional_width}"
        )

    integer = (0,) * (integer_width - len(value.integer)) + value.integer
    fractional = value.fractional + (0,) * (fractional_width - len(value.fractional))
    return Magnitude(integer, fractional)


def _split(digits: list[int], fractional_width: int) -> Magnitude:
    """Разбиение плоского списка цифр обратно на integer/fractional."""
    split_at = len(digits) - fractional_width
    integer = tuple(digits[:split_at]) or (0,)
    fractional = tuple(digits[split_at:]) or (0,)
    return Magnitude(integer, fractional)


# =============================================================================
# СДВИГИ (умножение/деление на 10^n)
# =============================================================================


def _validate_shift(places: int) -> None:
    if places < 0:
        raise ValueError(f"shift places must be non-negative, got {places}")


def shift_left(value: Magnitude, places: int) -> Magnitude:
    """
    Умножение модуля на 10^places переносом точки вправо.

    Цифры дробной части переходят в целую; если дробных цифр меньше чем
    places, целая часть дополняется нулями. Дробная часть ровно (0,)
    считается пустой. Один ведущий ноль, возникший после сдвига,
    отбрасывается.

    Args:
        value: Исходный модуль
        places: Количество разрядов (>= 0)

    Returns:
        Новый Magnitude (не обязательно канонический)

    Examples:
        >>> shift_left(Magnitude((1,), (2, 3)), 1)
        Magnitude(integer=(1, 2), fractional=(3,))
        >>> shift_left(Magnitude((0,), (5,)), 3)
        Magnitude(integer=(5, 0, 0), fractional=(0,))
    """
    _validate_shift(places)

    integer = list(value.integer)
    fractional = list(value.fractional)

    if fractional == [0]:
        # Ноль остаётся нулём
        if integer != [0]:
            integer.extend([0] * places)
    elif len(fractional) <= places:
        integer.extend(fractional)
        integer.extend([0] * (places - len(fractional)))
        fractional = [0]
    else:
        integer.extend(fractional[:places])
        fractional = fractional[places:]

    if len(integer) > 1 and integer[0] == 0:
        del integer[0]

    return Magnitude(tuple(integer), tuple(fractional))


def shift_right(value: Magnitude, places: int) -> Magnitude:
    """
    Деление модуля на 10^places переносом точки влево.

    Хвостовые цифры целой части переходят в начало дробной; если целых
    цифр не хватает, дробная часть дополняется нулями слева, а целая
    становится (0,). Целая часть ровно (0,) считается пустой. Один
    хвостовой ноль дробной части, возникший после сдвига, отбрасывается.

    Examples:
        >>> shift_right(Magnitude((1, 2), (3,)), 1)
        Magnitude(integer=(1,), fractional=(2, 3))
        >>> shift_right(Magnitude((5,), (0,)), 2)
        Magnitude(integer=(0,), fractional=(0, 5))
    """
    _validate_shift(places)

    integer = list(value.integer)
    fractional = list(value.fractional)

    if integer == [0]:
        if fractional != [0]:
            fractional = [0] * places + fractional
    elif len(integer) <= places:
        fractional = [0] * (places - len(integer)) + integer + fractional
        integer = [0]
    else:
        split_at = len(integer) - places
        fractional = integer[split_at:] + fractional
        integer = integer[:split_at]

    if len(fractional) > 1 and fractional[-1] == 0:
        fractional.pop()

    return Magnitude(tuple(integer), tuple(fractional))


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: Magnitude, b: Magnitude) -> int:
    """
    Сравнение двух модулей.

    Алгоритм (на канонических формах):
    1. Больше целых цифр → больше
    2. Поразрядно по целой части слева направо
    3. Поразрядно по дробной части; если одна дробная часть является
       префиксом другой, более длинная больше

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    a = strip_magnitude(a)
    b = strip_magnitude(b)

    if len(a.integer) != len(b.integer):
        return -1 if len(a.integer) < len(b.integer) else 1

    # Для tuple сравнение лексикографическое, префикс меньше
    if a.integer != b.integer:
        return -1 if a.integer < b.integer else 1

    if a.fractional != b.fractional:
        return -1 if a.fractional < b.fractional else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: Magnitude, b: Magnitude) -> Magnitude:
    """
    Сложение модулей с переносом.

    Операнды выравниваются до ширины max(integer) + 1 (запас под
    перенос) и max(fractional), затем складываются поразрядно от
    младшей дробной цифры к старшей целой.

    Returns:
        Каноническая сумма
    """
    integer_width = max(len(a.integer), len(b.integer)) + 1
    fractional_width = max(len(a.fractional), len(b.fractional))

    a = pad_magnitude(a, integer_width, fractional_width)
    b = pad_magnitude(b, integer_width, fractional_width)

    a_digits = a.integer + a.fractional
    b_digits = b.integer + b.fractional
    result = [0] * len(a_digits)

    carry = 0
    for idx in range(len(a_digits) - 1, -1, -1):
        total = a_digits[idx] + b_digits[idx] + carry
        carry = 1 if total > MAX_DIGIT else 0
        result[idx] = total % DIGIT_BASE

    return strip_magnitude(_split(result, fractional_width))


def subtract_magnitudes(a: Magnitude, b: Magnitude) -> tuple[Magnitude, bool]:
    """
    Вычитание модулей с заёмом: |a| - |b|.

    Если после старшего разряда остаётся заём, |a| < |b| и поразрядная
    разность равна 10^k - (|b| - |a|). Тогда модуль восстанавливается
    дополнением до десяти: каждая цифра до младшей ненулевой включительно
    заменяется на 9 - d, к младшей ненулевой прибавляется 1.

    Returns:
        (каноническая разность |(|a| - |b|)|, True если |a| < |b|)

    Examples:
        >>> subtract_magnitudes(Magnitude((1,), (0,)), Magnitude((0,), (9, 9)))
        (Magnitude(integer=(0,), fractional=(0, 1)), False)
        >>> subtract_magnitudes(Magnitude((0,), (0,)), Magnitude((1,), (0,)))
        (Magnitude(integer=(1,), fractional=(0,)), True)
    """
    integer_width = max(len(a.integer), len(b.integer))
    fractional_width = max(len(a.fractional), len(b.fractional))

    a = pad_magnitude(a, integer_width, fractional_width)
    b = pad_magnitude(b, integer_width, fractional_width)

    a_digits = a.integer + a.fractional
    b_digits = b.integer + b.fractional
    result = [0] * len(a_digits)

    borrow = 0
    for idx in range(len(a_digits) - 1, -1, -1):
        diff = a_digits[idx] - b_digits[idx] - borrow
        borrow = 1 if diff < 0 else 0
        result[idx] = diff % DIGIT_BASE

    negative = borrow == 1
    if negative:
        # При остаточном заёме результат ненулевой
        last_nonzero = max(idx for idx, digit in enumerate(result) if digit)
        for idx in range(last_nonzero + 1):
            result[idx] = MAX_DIGIT - result[idx]
        result[last_nonzero] += 1

    return strip_magnitude(_split(result, fractional_width)), negative


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_by_repeated_addition(a: Magnitude, b: Magnitude) -> Magnitude:
    """
    Умножение модулей повторным сложением со сдвигами.

    |a| сдвигается влево на len(b.integer) - 1 разрядов, чтобы совпасть со
    старшей целой цифрой b. Затем для каждой цифры b (целые от старшей к
    младшей, потом дробные) рабочее значение прибавляется к аккумулятору
    столько раз, какова цифра, и сдвигается на один разряд вправо.

    Сложность ~ O(len(b) * 9 * len(a)).
    """
    a = strip_magnitude(a)
    b = strip_magnitude(b)

    working = shift_left(a, len(b.integer) - 1)
    accumulator = ZERO_MAGNITUDE

    for digit in b.integer + b.fractional:
        for _ in range(digit):
            accumulator = add_magnitudes(accumulator, working)
        working = shift_right(working, 1)

    return strip_magnitude(accumulator)


def multiply_schoolbook(a: Magnitude, b: Magnitude) -> Magnitude:
    """
    Умножение модулей столбиком: O(n·m) произведений цифр с переносом.

    Результат совпадает с multiply_by_repeated_addition после
    канонизации.
    """
    a = strip_magnitude(a)
    b = strip_magnitude(b)

    a_digits = a.integer + a.fractional
    b_digits = b.integer + b.fractional
    fractional_width = len(a.fractional) + len(b.fractional)

    # Младшие разряды в начале списка
    product = [0] * (len(a_digits) + len(b_digits))
    for i, a_digit in enumerate(reversed(a_digits)):
        carry = 0
        for j, b_digit in enumerate(reversed(b_digits)):
            total = product[i + j] + a_digit * b_digit + carry
            product[i + j] = total % DIGIT_BASE
            carry = total // DIGIT_BASE
        product[i + len(b_digits)] += carry

    product.reverse()
    return strip_magnitude(_split(product, fractional_width))
