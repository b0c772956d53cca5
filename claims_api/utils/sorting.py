"""
Sorting utilities shared by the claims query and the table re-sort.

One comparator handles every column. The column's declared FieldType decides
how raw values compare: STRING with the current locale's collation, INTEGER
and DATE after parsing. Empty or unparseable values always sort last
regardless of direction. Sorting is stable.
"""

import locale
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Dict, List, Mapping, Optional, Sequence, TypeVar, Union

from claims_api.core.constants import COLUMN_TYPES, DEFAULT_SORT_KEY
from claims_api.core.enums import ClaimField, FieldType, SortDirection
from claims_api.domain.entities import ClaimRecord
from claims_api.utils.date_utils import format_date, parse_date
from claims_api.utils.validation_utils import parse_integer

T = TypeVar("T", ClaimRecord, Mapping[str, Any])


def column_value(item: Union[ClaimRecord, Mapping[str, Any]], key: str) -> Optional[str]:
    """Return a column in its wire (string) form, from a record or a wire dict."""
    if isinstance(item, ClaimRecord):
        return {
            ClaimField.CLAIM_ID.value: item.claim_id,
            ClaimField.MEMBER_ID.value: item.member_id,
            ClaimField.SERVICE_DATE.value: format_date(item.service_date),
            ClaimField.TOTAL_AMOUNT.value: str(item.total_amount),
            ClaimField.DIAGNOSIS_CODES.value: item.diagnosis_codes_text,
        }.get(key)

    value = item.get(key)
    return None if value is None else str(value)


def parse_sort_value(value: Optional[str], field_type: FieldType) -> Any:
    """
    Convert a raw value into its comparable form

    Args:
        value: Raw string value
        field_type: Semantic type of the column

    Returns:
        Comparable value, or None when the value is empty or unparseable
    """
    if value is None or not str(value).strip():
        return None

    if field_type == FieldType.INTEGER:
        return parse_integer(value)
    if field_type == FieldType.DATE:
        return parse_date(value)
    return locale.strxfrm(str(value).casefold())


def compare_values(a: Any, b: Any, direction: SortDirection = SortDirection.ASC) -> int:
    """
    Compare two parsed sort values.

    None is treated as maximal and stays last in both directions.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1

    comparison = (a > b) - (a < b)
    return -comparison if direction == SortDirection.DESC else comparison


def sort_claims(items: Sequence[T],
                key: str,
                direction: SortDirection = SortDirection.ASC,
                column_types: Optional[Dict[str, FieldType]] = None) -> List[T]:
    """
    Stable sort of claims by one column

    Args:
        items: ClaimRecords or wire dicts
        key: Column name (wire name, e.g. "totalAmount")
        direction: Sort direction
        column_types: Column to FieldType map, defaults to the claim columns

    Returns:
        New sorted list

    Raises:
        ValueError: If the column is unknown
    """
    column_types = column_types or COLUMN_TYPES
    if key not in column_types:
        raise ValueError(f"Unknown sort key: {key}")

    field_type = column_types[key]
    decorated = [(parse_sort_value(column_value(item, key), field_type), item) for item in items]
    decorated.sort(key=cmp_to_key(lambda a, b: compare_values(a[0], b[0], direction)))
    return [item for _, item in decorated]


@dataclass(frozen=True)
class SortState:
    """
    Active sort column and direction of the claims table.

    Selecting the active column again flips the direction; selecting a
    different column starts ascending.
    """
    key: str = DEFAULT_SORT_KEY
    direction: SortDirection = SortDirection.ASC

    def toggle(self, key: str) -> "SortState":
        if key not in COLUMN_TYPES:
            raise ValueError(f"Unknown sort key: {key}")
        if key == self.key:
            return SortState(key=key, direction=self.direction.flipped())
        return SortState(key=key, direction=SortDirection.ASC)

    def apply(self, items: Sequence[T]) -> List[T]:
        return sort_claims(items, self.key, self.direction)
