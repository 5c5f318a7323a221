"""32-bit register access over a character device, AXI GPIO register layout and driver status codes."""

__version__ = "1.0.0"