"""Point list export in the "x,y" JSON string format."""

import json
import math
from decimal import Decimal
from typing import Iterable

from .turtle import PathBuilder

ENCODING = "utf-8"


def _shortest_digits(magnitude: float) -> tuple[str, int]:
    """Shortest round-trip digits of a positive float and its decimal exponent."""
    _, digits, exponent = Decimal(repr(magnitude)).normalize().as_tuple()
    return "".join(map(str, digits)), len(digits) - 1 + exponent


def format_number(value: float) -> str:
    """Render a float like the consumer's invariant-culture shortest format.

    Integral values lose the fraction (``4``, ``-0``), exponents are upper
    case with a sign and two digits (``1E-05``). Scientific notation is used
    when the decimal exponent is below -4 or at least 15.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    prefix = "-" if math.copysign(1.0, value) < 0 else ""
    magnitude = abs(value)
    if magnitude == 0:
        return prefix + "0"

    digits, exponent = _shortest_digits(magnitude)
    if -5 < exponent < 15:
        text = repr(magnitude)
        if text.endswith(".0"):
            text = text[:-2]
        return prefix + text

    mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    exp_sign = "+" if exponent >= 0 else "-"
    return f"{prefix}{mantissa}E{exp_sign}{abs(exponent):02d}"


class PointListExporter:
    """Exports builder paths as a JSON array of "x,y" strings."""

    def export(self, builder: PathBuilder) -> str:
        """Serialize the builder's output coordinates."""
        return self.dumps(builder.drawing_path)

    def dumps(self, points: Iterable[tuple[float, float]]) -> str:
        # No whitespace: consumers compare the text byte for byte
        items = (f'"{format_number(x)},{format_number(y)}"' for x, y in points)
        return "[" + ",".join(items) + "]"

    def encode(self, points: Iterable[tuple[float, float]]) -> bytes:
        return self.dumps(points).encode(ENCODING)

    def loads(self, text: str | bytes) -> list[tuple[float, float]]:
        """Parse a serialized point list back into coordinates."""
        if isinstance(text, bytes):
            text = text.decode(ENCODING)

        items = json.loads(text)
        if not isinstance(items, list):
            raise ValueError(f"Expected a JSON array, got {type(items).__name__}")

        points = []
        for i, item in enumerate(items):
            if not isinstance(item, str):
                raise ValueError(f"Item {i}: expected a string, got {item!r}")
            parts = item.split(",")
            if len(parts) != 2:
                raise ValueError(f"Item {i}: expected 'x,y', got {item!r}")
            try:
                points.append((float(parts[0]), float(parts[1])))
            except ValueError:
                raise ValueError(f"Item {i}: invalid coordinate in {item!r}") from None
        return points
