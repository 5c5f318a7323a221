# fpgaio

Read and write the 32-bit registers of an FPGA design through a character
device such as `/dev/xdma0_user`, and look up the register layout and
configuration of the AXI GPIO cores placed in that design.

A physical register address is turned into a file offset by subtracting the
base address of the mapped region (`0x40000000` by default); each access is a
single little-endian 32-bit `pread`/`pwrite` at that offset.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
fpgaio [--device PATH]
```

Opens the register device (default `/dev/xdma0_user`), prints the test banner
and closes the device again. The exit status is 0 on success and 1 if the
device cannot be opened or closed; when opening fails it also prints
"Check if driver is installed."

## Library use

```python
from fpgaio.regio import RegisterBus, RegisterIOError
from fpgaio.gpio_config import lookup_config, DATA_OFFSET, TRI_OFFSET

with RegisterBus("/dev/xdma0_user", 0x40000000) as bus:
    config = lookup_config(0x40000000)
    bus.write32(config.base_address + TRI_OFFSET, 0x0)   # channel 1 all outputs
    bus.write32(config.base_address + DATA_OFFSET, 0x1)
    print(hex(bus.read32(config.base_address + DATA_OFFSET)))
```

Modules:

- `fpgaio.regio` – `RegisterBus` (`open`, `close`, context manager, `read32`,
  `write32`, `is_open`), `IoStatus`, `RegisterIOError` and `is_valid_addr`.
  Address 0 is rejected with `IoStatus.ERROR_INVALID_ADDR`; accesses on a bus
  that is not open, failed system calls and short transfers raise
  `RegisterIOError` with `ERROR_READ` or `ERROR_WRITE`. `write32` writes the
  low 32 bits of the value.
- `fpgaio.gpio_config` – the GPIO register offsets (`DATA_OFFSET`,
  `TRI_OFFSET`, `DATA2_OFFSET`, `TRI2_OFFSET`, `GIE_OFFSET`, `ISR_OFFSET`,
  `IER_OFFSET`, `CHAN_OFFSET`), the interrupt masks, the frozen dataclass
  `GpioConfig`, the device table `CONFIG_TABLE` and `lookup_config`, which
  returns the first entry at a base address (any entry for address 0) or
  `None`.
- `fpgaio.status` – `Status`, the driver status codes as an `IntEnum`.
- `fpgaio.bits` – `lower_32_bits`, `upper_32_bits`, `left_shift_by_32_bits`
  and the word masks and component-state constants.
- `fpgaio.cli` – `main`, the command above.

## What it does not do

There is no GPIO driver object here: setting channel direction, reading,
writing, setting or clearing discretes, and controlling GPIO interrupts are
done by the caller with `RegisterBus.read32`/`write32` and the offsets in
`fpgaio.gpio_config`. Channel numbers, dual-channel support and interrupt
support are not checked for you.