"""Register layout and configuration table of the AXI GPIO core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

# Register offsets from the device base address.
DATA_OFFSET = 0x0
"""Data register of the first channel."""
TRI_OFFSET = 0x4
"""I/O direction register of the first channel."""
DATA2_OFFSET = 0x8
"""Data register of the second channel."""
TRI2_OFFSET = 0xC
"""I/O direction register of the second channel."""

GIE_OFFSET = 0x11C
"""Global interrupt enable register."""
ISR_OFFSET = 0x120
"""Interrupt status register."""
IER_OFFSET = 0x128
"""Interrupt enable register."""

CHAN_OFFSET = 8
"""Distance between the register sets of the two channels."""

# Interrupt status and enable register bits.
IR_MASK = 0x3
IR_CH1_MASK = 0x1
IR_CH2_MASK = 0x2

GIE_GINTR_ENABLE_MASK = 0x80000000
"""Global interrupt enable bit."""


@dataclass(frozen=True)
class GpioConfig:
    """Hardware configuration of one GPIO device."""

    name: str
    base_address: int
    interrupt_present: bool = False
    is_dual: bool = False
    intr_id: int = 0
    """Bits 11:0 interrupt id, bits 15:12 trigger type and level flags."""
    intr_parent: int = 0
    """Bit 0 interrupt parent type, remaining bits parent base address."""
    width: int = 0


CONFIG_TABLE: tuple[GpioConfig, ...] = (
    GpioConfig(
        name="xlnx,axi-gpio-2.0",
        base_address=0x40000000,
        interrupt_present=False,
        is_dual=False,
        intr_id=0xFFFF,
        intr_parent=0xFFFF,
        width=0x1,
    ),
)
"""Devices present in the system."""


def lookup_config(
    base_address: int, table: Iterable[GpioConfig] = CONFIG_TABLE
) -> Optional[GpioConfig]:
    """Return the first entry of ``table`` at ``base_address``.

    A base address of zero matches the first entry. ``None`` is returned
    when nothing matches.
    """
    return next(
        (
            config
            for config in table
            if not base_address or config.base_address == base_address
        ),
        None,
    )