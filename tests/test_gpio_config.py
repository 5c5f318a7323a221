import dataclasses

import pytest

from fpgaio.gpio_config import CONFIG_TABLE, GpioConfig, lookup_config


@pytest.fixture
def table():
    return (
        GpioConfig("first", 0x1000, interrupt_present=True, is_dual=False),
        GpioConfig("second", 0x2000, interrupt_present=False, is_dual=True),
        GpioConfig("duplicate", 0x2000),
    )


def test_default_table_finds_axi_gpio():
    config = lookup_config(0x40000000)
    assert config is not None
    assert config.name == "xlnx,axi-gpio-2.0"
    assert config.base_address == 0x40000000
    assert config.interrupt_present is False
    assert config.is_dual is False
    assert config.intr_id == 0xFFFF
    assert config.intr_parent == 0xFFFF
    assert config.width == 1


def test_zero_address_matches_first_entry(table):
    assert lookup_config(0, table) is table[0]
    assert lookup_config(0) is CONFIG_TABLE[0]


def test_lookup_by_address(table):
    found = lookup_config(0x1000, table)
    assert found is table[0]
    assert found.interrupt_present is True


def test_first_match_wins(table):
    found = lookup_config(0x2000, table)
    assert found is table[1]
    assert found.name == "second"


def test_unknown_address_returns_none(table):
    assert lookup_config(0x3000, table) is None
    assert lookup_config(0x12345678) is None


def test_empty_table_returns_none():
    assert lookup_config(0, ()) is None
    assert lookup_config(0x1000, []) is None


def test_accepts_any_iterable(table):
    found = lookup_config(0x2000, iter(table))
    assert found is table[1]


def test_config_is_immutable():
    config = CONFIG_TABLE[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.base_address = 0  # type: ignore[misc]
    assert lookup_config(0x40000000) is config