"""Place-value decomposition for positional numeral systems."""

from __future__ import annotations

from athena.errors import InvalidInputError
from athena.models import ConversionResult, NumeralLogic, NumeralSystem


def highest_power(number: int, base: int) -> int:
    """Largest exponent ``p`` with ``base ** p <= number`` (0 for number < base)."""
    power = 0
    while base ** (power + 1) <= number:
        power += 1
    return power


def convert_positional(number: int, system: NumeralSystem) -> ConversionResult:
    """Split ``number`` into base-``system.base`` digits, most significant first.

    Zero yields the single digit ``[0]``; the dispatcher normally answers zero
    from the schema before reaching this function.
    """
    if system.logic is not NumeralLogic.POSITIONAL:
        raise ValueError(f"System '{system.id}' is not positional")
    base = system.base
    if base < 2:
        raise ValueError(f"Positional system '{system.id}' needs base >= 2, got {base}")
    if number < 0:
        raise InvalidInputError(f"Numbers must be non-negative, got {number}")

    power = highest_power(number, base)
    trace = [f"Highest power of {base} fitting in {number} is {base}^{power}"]
    digits: list[int] = []
    remainder = number
    for place in range(power, -1, -1):
        place_value = base**place
        digit, remainder = divmod(remainder, place_value)
        digits.append(digit)
        trace.append(f"Place {base}^{place} ({place_value}): {digit} units. Remainder: {remainder}")

    return ConversionResult(
        system_id=system.id,
        value=number,
        kind=NumeralLogic.POSITIONAL,
        digits=tuple(digits),
        trace=tuple(trace),
        digit_renderer=system.digit_renderer,
    )


def digits_value(digits: tuple[int, ...] | list[int], base: int) -> int:
    """Evaluate a most-significant-first digit sequence back to an integer."""
    total = 0
    for digit in digits:
        total = total * base + digit
    return total
