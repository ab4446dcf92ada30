"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a stored document or a form field.
            ``None`` and blank strings count as zero.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is not numeric.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric value: {value!r}")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return Decimal("0")
    try:
        result = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a numeric value: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Not a finite value: {value!r}")
    return result


__all__ = ["coerce_decimal"]
