[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fpgaio"
version = "1.0.0"
description = "32-bit register access to FPGA designs exposed through a character device, with the AXI GPIO register layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["fpga", "gpio", "registers", "xdma", "axi", "pread", "pwrite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Hardware Drivers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fpgaio = "fpgaio.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fpgaio"]

[tool.pytest.ini_options]
addopts = "-ra"
