"""
Read side of the claims store: filtering, default ordering and summaries.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from claims_api.core.enums import ClaimField, SortDirection
from claims_api.domain.entities import ClaimRecord
from claims_api.services.claims_store import ClaimsStore
from claims_api.utils.date_utils import is_within_range
from claims_api.utils.logger import get_logger
from claims_api.utils.sorting import sort_claims

logger = get_logger(__name__)


@dataclass(frozen=True)
class ClaimFilters:
    """Conjunctive query filters. None means unconstrained."""
    member_id: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def matches(self, record: ClaimRecord) -> bool:
        if self.member_id and record.member_id != self.member_id:
            return False
        return is_within_range(record.service_date, self.start_date, self.end_date)


@dataclass(frozen=True)
class ClaimsSummary:
    count: int
    total_amount: int


class ClaimsQueryService:
    """Filtered reads over one store snapshot."""

    def __init__(self, store: ClaimsStore):
        self.store = store
        self.logger = logger

    def search(self,
               filters: Optional[ClaimFilters] = None,
               sort_by: Optional[str] = None,
               direction: SortDirection = SortDirection.ASC) -> List[ClaimRecord]:
        """
        Query committed claims

        Results are ordered by serviceDate descending. When sort_by is given
        the ordered result is re-sorted by that column; ties keep the
        serviceDate order.

        Args:
            filters: Optional member and inclusive date filters
            sort_by: Optional column to re-sort by
            direction: Direction for sort_by

        Returns:
            Matching records
        """
        filters = filters or ClaimFilters()
        matched = [record for record in self.store.snapshot() if filters.matches(record)]
        results = sort_claims(matched, ClaimField.SERVICE_DATE.value, SortDirection.DESC)

        if sort_by:
            results = sort_claims(results, sort_by, direction)

        self.logger.debug(f"Claims query {filters} matched {len(results)} records")
        return results

    def summarize(self, filters: Optional[ClaimFilters] = None) -> ClaimsSummary:
        """Count and total amount (minor units) of the matching claims."""
        records = self.search(filters)
        return ClaimsSummary(
            count=len(records),
            total_amount=sum(record.total_amount for record in records),
        )
