"""Tests for claims filtering, ordering and summaries."""

from __future__ import annotations

from datetime import date

import pytest

from claims_api.core.enums import SortDirection
from claims_api.services import ClaimFilters, ClaimsQueryService, ClaimsStore

from tests.conftest import make_record


@pytest.fixture
def query(store: ClaimsStore) -> ClaimsQueryService:
    store.append_batch([
        make_record("C1", "M1", date(2024, 1, 10), 1000),
        make_record("C2", "M2", date(2024, 1, 15), 2500),
        make_record("C3", "M1", date(2024, 1, 20), 500),
        make_record("C4", "M1", date(2024, 1, 15), 700),
    ])
    return ClaimsQueryService(store)


def _ids(records) -> list:
    return [record.claim_id for record in records]


def test_results_are_ordered_by_service_date_descending(query: ClaimsQueryService) -> None:
    # C2 and C4 share a date and keep insertion order
    assert _ids(query.search()) == ["C3", "C2", "C4", "C1"]


def test_start_date_is_inclusive(query: ClaimsQueryService) -> None:
    results = query.search(ClaimFilters(start_date=date(2024, 1, 15)))

    assert _ids(results) == ["C3", "C2", "C4"]


def test_end_date_is_inclusive(query: ClaimsQueryService) -> None:
    results = query.search(ClaimFilters(end_date=date(2024, 1, 15)))

    assert _ids(results) == ["C2", "C4", "C1"]


def test_filters_are_conjunctive(query: ClaimsQueryService) -> None:
    filters = ClaimFilters(member_id="M1", start_date=date(2024, 1, 11), end_date=date(2024, 1, 20))

    assert _ids(query.search(filters)) == ["C3", "C4"]


def test_unknown_member_matches_nothing(query: ClaimsQueryService) -> None:
    assert query.search(ClaimFilters(member_id="M404")) == []


def test_inverted_range_matches_nothing(query: ClaimsQueryService) -> None:
    filters = ClaimFilters(start_date=date(2024, 2, 1), end_date=date(2024, 1, 1))

    assert query.search(filters) == []


def test_sort_by_resorts_and_keeps_date_order_for_ties(query: ClaimsQueryService) -> None:
    results = query.search(sort_by="memberId")

    assert _ids(results) == ["C3", "C4", "C1", "C2"]


def test_sort_by_amount_descending(query: ClaimsQueryService) -> None:
    results = query.search(sort_by="totalAmount", direction=SortDirection.DESC)

    assert _ids(results) == ["C2", "C1", "C4", "C3"]


def test_unknown_sort_key_raises(query: ClaimsQueryService) -> None:
    with pytest.raises(ValueError):
        query.search(sort_by="nope")


def test_summary_counts_and_totals_matching_claims(query: ClaimsQueryService) -> None:
    summary = query.summarize(ClaimFilters(member_id="M1"))

    assert summary.count == 3
    assert summary.total_amount == 2200


def test_summary_of_empty_store() -> None:
    summary = ClaimsQueryService(ClaimsStore()).summarize()

    assert summary.count == 0
    assert summary.total_amount == 0


def test_start_date_between_stored_dates() -> None:
    store = ClaimsStore([
        make_record("C1", service_date=date(2024, 1, 1)),
        make_record("C2", service_date=date(2024, 2, 1)),
    ])

    results = ClaimsQueryService(store).search(ClaimFilters(start_date=date(2024, 1, 15)))

    assert [record.service_date for record in results] == [date(2024, 2, 1)]
