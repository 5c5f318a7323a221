"""32-bit register access through a character device with positional I/O."""

from __future__ import annotations

import os
import struct
from enum import IntEnum
from typing import Optional

from .bits import lower_32_bits

DEFAULT_DEVICE_PATH = "/dev/xdma0_user"
DEFAULT_BASE_ADDRESS = 0x40000000

_WORD = struct.Struct("<I")


class IoStatus(IntEnum):
    """Outcome of a register access."""

    SUCCESS = 0
    ERROR_READ = -1
    ERROR_WRITE = -2
    ERROR_INVALID_ADDR = -3


class RegisterIOError(Exception):
    """A register read or write failed."""

    def __init__(self, status: IoStatus, address: int, detail: str = "") -> None:
        text = f"{status.name.lower()} at 0x{address:x}"
        if detail:
            text = f"{text}: {detail}"
        super().__init__(text)
        self.status = status
        self.address = address


def is_valid_addr(addr: int) -> bool:
    """Return whether ``addr`` may be used for register I/O."""
    return addr != 0


class RegisterBus:
    """Register window of a device file mapped at ``base_address``.

    Physical addresses are translated to file offsets by subtracting
    the base address. Words are little-endian.
    """

    def __init__(
        self,
        path: str = DEFAULT_DEVICE_PATH,
        base_address: int = DEFAULT_BASE_ADDRESS,
    ) -> None:
        self.path = path
        self.base_address = base_address
        self._fd: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self._fd is not None

    def open(self) -> "RegisterBus":
        """Open the device file for reading and writing."""
        if self._fd is None:
            self._fd = os.open(self.path, os.O_RDWR)
        return self

    def close(self) -> None:
        """Close the device file; closing twice is harmless."""
        fd, self._fd = self._fd, None
        if fd is not None:
            os.close(fd)

    def __enter__(self) -> "RegisterBus":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _offset(self, addr: int) -> int:
        if not is_valid_addr(addr):
            raise RegisterIOError(IoStatus.ERROR_INVALID_ADDR, addr)
        return addr - self.base_address

    def read32(self, addr: int) -> int:
        """Read the 32-bit register at physical address ``addr``."""
        offset = self._offset(addr)
        if self._fd is None:
            raise RegisterIOError(IoStatus.ERROR_READ, addr, "device not open")
        try:
            data = os.pread(self._fd, _WORD.size, offset)
        except OSError as err:
            raise RegisterIOError(IoStatus.ERROR_READ, addr, err.strerror or "") from err
        if len(data) != _WORD.size:
            raise RegisterIOError(IoStatus.ERROR_READ, addr, "short read")
        return _WORD.unpack(data)[0]

    def write32(self, addr: int, value: int) -> None:
        """Write the low 32 bits of ``value`` to physical address ``addr``."""
        offset = self._offset(addr)
        if self._fd is None:
            raise RegisterIOError(IoStatus.ERROR_WRITE, addr, "device not open")
        try:
            written = os.pwrite(self._fd, _WORD.pack(lower_32_bits(value)), offset)
        except OSError as err:
            raise RegisterIOError(IoStatus.ERROR_WRITE, addr, err.strerror or "") from err
        if written != _WORD.size:
            raise RegisterIOError(IoStatus.ERROR_WRITE, addr, "short write")