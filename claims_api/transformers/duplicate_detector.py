# ==============================================
# claims_api/transformers/duplicate_detector.py
# ==============================================
from collections import Counter
from typing import List, Sequence

from claims_api.core.constants import DUPLICATE_CLAIM_ID_MESSAGE
from claims_api.domain.entities import InvalidRow, RowOutcome, ValidRow
from claims_api.utils.logger import get_logger

logger = get_logger(__name__)


class DuplicateClaimDetector:
    """
    Flags claimIds that occur more than once within one upload.

    Only rows that passed field validation take part. Every occurrence of a
    repeated claimId is reclassified, the first one included, with the single
    violation "Duplicate claimId". Rows already invalid are passed through
    untouched. The store is never consulted.
    """

    def __init__(self):
        self.logger = logger

    def detect(self, outcomes: Sequence[RowOutcome]) -> List[RowOutcome]:
        """
        Reclassify duplicate claimIds

        Args:
            outcomes: Field validation outcomes in row order

        Returns:
            Outcomes in the same row order with duplicates made invalid
        """
        counts = Counter(
            outcome.record.claim_id for outcome in outcomes if isinstance(outcome, ValidRow)
        )
        duplicated_ids = {claim_id for claim_id, count in counts.items() if count > 1}

        if not duplicated_ids:
            return list(outcomes)

        self.logger.info(f"Found {len(duplicated_ids)} duplicated claimIds in upload")

        result: List[RowOutcome] = []
        for outcome in outcomes:
            if isinstance(outcome, ValidRow) and outcome.record.claim_id in duplicated_ids:
                result.append(InvalidRow(
                    row_number=outcome.row_number,
                    raw=outcome.raw,
                    errors=[DUPLICATE_CLAIM_ID_MESSAGE],
                ))
            else:
                result.append(outcome)
        return result
