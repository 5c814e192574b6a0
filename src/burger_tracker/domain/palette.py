"""Packed ARGB colours used across the application."""

from burger_tracker.domain.stats import Tier

ARGB_MAX = 0xFFFFFFFF

HOME_COLOR = 0xFF2E7D32
UNRESOLVED_PLACE_COLOR = 0xFF000000
NEW_PLACE_COLOR = 0xFFFFA000

TIER_COLORS: dict[Tier, int] = {
    Tier.S: 0xFFEF5350,
    Tier.A: 0xFFFFCA28,
    Tier.B: 0xFF9CCC65,
    Tier.C: 0xFFBDBDBD,
}

TAG_COLORS: tuple[int, ...] = (
    0xFFF44336,
    0xFFE91E63,
    0xFF9C27B0,
    0xFF673AB7,
    0xFF3F51B5,
    0xFF2196F3,
    0xFF03A9F4,
    0xFF00BCD4,
    0xFF009688,
    0xFF4CAF50,
    0xFF8BC34A,
    0xFFCDDC39,
    0xFFFFEB3B,
    0xFFFFC107,
    0xFFFF9800,
    0xFFFF5722,
    0xFF795548,
    0xFF9E9E9E,
    0xFF607D8B,
    0xFF000000,
)


def is_valid_argb(color: int) -> bool:
    """Return True when the value fits in an unsigned 32-bit ARGB word."""
    return 0 <= color <= ARGB_MAX


def argb_to_hex(color: int) -> str:
    """Format a packed ARGB colour as #AARRGGBB."""
    return f"#{color & ARGB_MAX:08X}"


def hex_to_argb(value: str) -> int:
    """Parse #RRGGBB or #AARRGGBB into a packed ARGB colour.

    Six-digit values are treated as fully opaque.
    """
    digits = value.strip().removeprefix("#")
    if len(digits) == 6:  # noqa: PLR2004
        digits = f"FF{digits}"
    if len(digits) != 8:  # noqa: PLR2004
        raise ValueError(f"Invalid colour: {value!r}")
    return int(digits, 16)
