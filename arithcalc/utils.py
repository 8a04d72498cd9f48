import decimal
import enum
import math


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


def format_result(value: float) -> str:
    """Format a result the way JVM doubles print.

    Values in [1e-3, 1e7) and zero print as plain decimals (3.0, 0.001),
    everything else in scientific form with an E exponent (1.0E7, 1.5E-5),
    and the non-finite values as Infinity, -Infinity and NaN.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0.0 or 1e-3 <= abs(value) < 1e7:
        return repr(value)

    # repr gives the shortest digits that round-trip
    sign, digits, exponent = decimal.Decimal(repr(value)).as_tuple()
    scientific_exponent = len(digits) + exponent - 1
    significant = "".join(str(d) for d in digits).rstrip("0")
    mantissa = f"{significant[0]}.{significant[1:] or '0'}"
    return f"{'-' if sign else ''}{mantissa}E{scientific_exponent}"
