import pytest

from tako.syslog_codes import (
    INTERNAL_MARK,
    INTERNAL_NOPRI,
    NFACILITIES,
    Facility,
    Priority,
    facility_by_name,
    facility_of,
    log_mask,
    log_upto,
    make_priority,
    priority_by_name,
    priority_of,
)


@pytest.mark.parametrize("facility", range(NFACILITIES))
@pytest.mark.parametrize("priority", list(Priority))
def test_make_priority_round_trip(facility, priority):
    value = make_priority(facility, priority)
    assert priority_of(value) == priority
    assert facility_of(value) == facility


def test_upto_contains_exactly_lower_or_equal():
    for upper in Priority:
        for other in Priority:
            assert bool(log_upto(upper) & log_mask(other)) == (other <= upper)


def test_masks_are_distinct_bits():
    masks = [log_mask(p) for p in Priority]
    assert len(set(masks)) == len(masks)
    assert all(mask & (mask - 1) == 0 for mask in masks)


@pytest.mark.parametrize(
    "name,expected",
    [("error", Priority.ERR), ("err", Priority.ERR), ("panic", Priority.EMERG),
     ("warn", Priority.WARNING), ("none", INTERNAL_NOPRI)],
)
def test_priority_names(name, expected):
    assert priority_by_name(name) == expected


def test_facility_names():
    assert facility_by_name("security") == facility_by_name("auth") == Facility.AUTH
    assert facility_by_name("mark") == INTERNAL_MARK
    assert facility_by_name("local7") == Facility.LOCAL7


def test_unknown_names_raise():
    with pytest.raises(ValueError):
        priority_by_name("loud")
    with pytest.raises(ValueError):
        facility_by_name("nowhere")