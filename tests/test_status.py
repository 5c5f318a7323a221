import pytest

from fpgaio.status import Status


def test_documented_codes():
    assert Status(0) is Status.SUCCESS
    assert Status(401) is Status.MEMTEST_FAILED
    assert Status(1226) is Status.TMRCTR_TIMER_FAILED
    assert Status(1451) is Status.NAND_WRITE_PROTECTED


def test_device_not_found_follows_failure():
    assert Status(int(Status.FAILURE) + 1) is Status.DEVICE_NOT_FOUND
    assert Status(2) is Status.DEVICE_NOT_FOUND


def test_lookup_by_value_round_trips():
    for status in Status:
        assert Status(int(status)) is status


def test_lookup_by_name_round_trips():
    for status in Status:
        assert Status[status.name] is Status(status.value)


def test_no_aliases():
    names = [Status(int(member)).name for member in Status.__members__.values()]
    assert sorted(names) == sorted(Status.__members__)


@pytest.mark.parametrize("missing", [25, 516, 520, 4096])
def test_unassigned_codes_are_rejected(missing):
    with pytest.raises(ValueError):
        Status(missing)


def test_all_codes_within_reserved_range():
    assert all(0 <= int(Status(int(status))) <= 4095 for status in Status)


def test_success_is_the_only_falsy_code():
    falsy = [Status(int(status)) for status in Status if not status]
    assert falsy == [Status.SUCCESS]


def test_common_codes_below_utility_range():
    assert Status(32) is Status.GLITCH_ERROR
    assert Status(501) is Status.PFIFO_LACK_OF_DATA
    assert Status(541) is Status.IPIF_ERROR
    assert Status(1001) is Status.EMAC_MEMORY_SIZE_ERROR
    assert Status(32) < Status(401) < Status(501)
    assert Status(541) < Status(1001)