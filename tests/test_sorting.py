"""Tests for the column sort engine and table sort state."""

from __future__ import annotations

from datetime import date

import pytest

from claims_api.core.enums import FieldType, SortDirection
from claims_api.utils.sorting import SortState, compare_values, parse_sort_value, sort_claims

from tests.conftest import make_record


def _ids(items) -> list:
    return [item["claimId"] if isinstance(item, dict) else item.claim_id for item in items]


def test_integer_columns_compare_numerically() -> None:
    rows = [{"claimId": "A", "totalAmount": "900"}, {"claimId": "B", "totalAmount": "1000"}]

    assert _ids(sort_claims(rows, "totalAmount")) == ["A", "B"]
    assert _ids(sort_claims(rows, "totalAmount", SortDirection.DESC)) == ["B", "A"]


def test_string_columns_compare_lexically() -> None:
    rows = [{"claimId": "C10"}, {"claimId": "C9"}, {"claimId": "c1"}]

    assert _ids(sort_claims(rows, "claimId")) == ["c1", "C10", "C9"]


def test_date_columns_compare_as_dates() -> None:
    records = [
        make_record("A", service_date=date(2024, 3, 1)),
        make_record("B", service_date=date(2023, 12, 31)),
    ]

    assert _ids(sort_claims(records, "serviceDate")) == ["B", "A"]


def test_sort_is_stable_for_equal_values() -> None:
    records = [
        make_record("A", total_amount=500),
        make_record("B", total_amount=100),
        make_record("C", total_amount=500),
        make_record("D", total_amount=500),
    ]

    assert _ids(sort_claims(records, "totalAmount")) == ["B", "A", "C", "D"]
    assert _ids(sort_claims(records, "totalAmount", SortDirection.DESC)) == ["A", "C", "D", "B"]


@pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
def test_empty_values_sort_last_in_both_directions(direction: SortDirection) -> None:
    records = [
        make_record("A", diagnosis_codes=()),
        make_record("B", diagnosis_codes=("B20",)),
        make_record("C", diagnosis_codes=("A10",)),
    ]

    assert _ids(sort_claims(records, "diagnosisCodes", direction))[-1] == "A"


def test_unparseable_values_sort_last() -> None:
    rows = [{"claimId": "A", "totalAmount": "n/a"}, {"claimId": "B", "totalAmount": "5"}]

    assert _ids(sort_claims(rows, "totalAmount", SortDirection.DESC)) == ["B", "A"]


def test_unknown_key_raises() -> None:
    with pytest.raises(ValueError):
        sort_claims([], "unknown")


def test_parse_and_compare_helpers() -> None:
    assert parse_sort_value("", FieldType.INTEGER) is None
    assert parse_sort_value("42", FieldType.INTEGER) == 42
    assert parse_sort_value("2024-01-05", FieldType.DATE) == date(2024, 1, 5)
    assert compare_values(None, 1) == 1
    assert compare_values(1, None, SortDirection.DESC) == -1
    assert compare_values(1, 2, SortDirection.DESC) == 1


def test_sort_state_defaults_to_claim_id_ascending() -> None:
    state = SortState()

    assert state.key == "claimId"
    assert state.direction == SortDirection.ASC


def test_toggle_same_key_flips_direction() -> None:
    state = SortState().toggle("claimId")

    assert state.direction == SortDirection.DESC
    assert state.toggle("claimId").direction == SortDirection.ASC


def test_toggle_new_key_starts_ascending() -> None:
    state = SortState(key="claimId", direction=SortDirection.DESC).toggle("totalAmount")

    assert state == SortState(key="totalAmount", direction=SortDirection.ASC)


def test_toggle_unknown_key_raises() -> None:
    with pytest.raises(ValueError):
        SortState().toggle("unknown")


def test_apply_sorts_with_active_state() -> None:
    records = [make_record("A", total_amount=5), make_record("B", total_amount=50)]

    assert _ids(SortState("totalAmount", SortDirection.DESC).apply(records)) == ["B", "A"]
