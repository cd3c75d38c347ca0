"""Pricing rules for discount events."""
from __future__ import annotations

from typing import Any

from whycookin.core.errors import ValidationError


def complete_pricing(values: dict[str, Any]) -> dict[str, Any]:
    """Fill in whichever discount field is missing.

    At least one of ``discount_price`` and ``discount_percentage`` must be
    present. When ``original_price`` is known the other one is derived from
    it, rounded to two decimals.

    Raises:
        ValidationError: If both discount fields are missing.
    """
    price = values.get("discount_price")
    percentage = values.get("discount_percentage")
    original = values.get("original_price")

    if price is None and percentage is None:
        raise ValidationError("Either discount_price or discount_percentage is required")

    if original:
        if price is None:
            price = round(original * (1 - percentage / 100), 2)
        elif percentage is None:
            percentage = round((1 - price / original) * 100, 2)

    return {**values, "discount_price": price, "discount_percentage": percentage}
