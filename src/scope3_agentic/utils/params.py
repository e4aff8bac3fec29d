# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Helpers for building tool argument dicts."""

from typing import Any


def drop_none(values: dict[str, Any]) -> dict[str, Any]:
    """Copy of values without the keys whose value is None."""
    return {key: value for key, value in values.items() if value is not None}
