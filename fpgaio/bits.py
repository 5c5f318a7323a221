"""Word-splitting helpers and driver-wide constants."""

WORD_MASK = 0xFFFFFFFF
DOUBLE_WORD_MASK = 0xFFFFFFFFFFFFFFFF

ULONG64_HI_MASK = 0xFFFFFFFF00000000
ULONG64_LO_MASK = ~ULONG64_HI_MASK & DOUBLE_WORD_MASK

COMPONENT_IS_READY = 0x11111111
"""Marks a driver instance as initialised and ready to use."""

COMPONENT_IS_STARTED = 0x22222222
"""Marks a driver instance as started."""


def lower_32_bits(n: int) -> int:
    """Return bits 0-31 of ``n``."""
    return n & WORD_MASK


def upper_32_bits(n: int) -> int:
    """Return bits 32-63 of ``n``."""
    return (n >> 32) & WORD_MASK


def left_shift_by_32_bits(n: int) -> int:
    """Return ``n`` shifted into the upper half of a 64-bit word."""
    return (n << 32) & DOUBLE_WORD_MASK