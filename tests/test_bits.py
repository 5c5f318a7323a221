import pytest

from fpgaio.bits import (
    COMPONENT_IS_READY,
    COMPONENT_IS_STARTED,
    ULONG64_HI_MASK,
    ULONG64_LO_MASK,
    WORD_MASK,
    left_shift_by_32_bits,
    lower_32_bits,
    upper_32_bits,
)

SAMPLES = [
    0,
    1,
    WORD_MASK,
    ULONG64_HI_MASK,
    ULONG64_LO_MASK,
    COMPONENT_IS_READY,
    left_shift_by_32_bits(COMPONENT_IS_STARTED) | COMPONENT_IS_READY,
    ULONG64_HI_MASK | ULONG64_LO_MASK,
]


@pytest.mark.parametrize("n", SAMPLES)
def test_split_and_join_round_trip(n):
    assert left_shift_by_32_bits(upper_32_bits(n)) | lower_32_bits(n) == n


@pytest.mark.parametrize("n", SAMPLES)
def test_halves_fit_in_a_word(n):
    assert lower_32_bits(n) <= WORD_MASK
    assert upper_32_bits(n) <= WORD_MASK


def test_high_mask_splits_cleanly():
    assert upper_32_bits(ULONG64_HI_MASK) == WORD_MASK
    assert lower_32_bits(ULONG64_HI_MASK) == lower_32_bits(0)


def test_low_mask_is_complement_of_high_mask():
    assert lower_32_bits(ULONG64_LO_MASK) == WORD_MASK
    assert upper_32_bits(ULONG64_LO_MASK) == 0
    assert lower_32_bits(ULONG64_HI_MASK) & lower_32_bits(ULONG64_LO_MASK) == 0


def test_shift_of_word_mask_gives_high_mask():
    assert left_shift_by_32_bits(WORD_MASK) == ULONG64_HI_MASK


def test_shift_drops_bits_beyond_64():
    assert left_shift_by_32_bits(ULONG64_HI_MASK) == 0


def test_lower_bits_of_negative_value_wrap():
    assert lower_32_bits(-1) == WORD_MASK
    assert upper_32_bits(-1) == WORD_MASK


def test_component_markers_are_distinct_words():
    assert lower_32_bits(COMPONENT_IS_READY) == COMPONENT_IS_READY
    assert upper_32_bits(COMPONENT_IS_STARTED) == 0
    assert COMPONENT_IS_READY != COMPONENT_IS_STARTED