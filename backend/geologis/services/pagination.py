"""
Geologis Backend — Pagination Engine
======================================

What:  Page-number pagination over in-memory sequences, shared by the
       countries, continents and cities endpoints.
How:   derive_count() clamps the caller's page size, paginate() resolves the
       page and slices the [start, end) window, build_page() wraps both into
       the list envelope.

Page count rule:
    totalPages = max(1, round(total / count)), rounding half-up.
    This is a rounding, not a ceiling: 23 items at 10 per page report
    2 pages and items 21-23 can't be reached. Do not change it to a
    ceiling without versioning the API.
"""

import math
from typing import Any, List, Sequence, Tuple

from geologis.exceptions import ArgumentsRequiredError, InvalidPaginationInputError
from geologis.schemas.geo import PageResponse

DEFAULT_PAGE = 1


def coerce_int(value: Any) -> int:
    """
    Coerce a query value to an int, flooring fractions.

    Returns 0 for anything that is not a finite number, which every caller
    treats as "invalid, use the default".
    """
    if value is None or isinstance(value, bool):
        return 0
    try:
        number = float(str(value).strip())
    except ValueError:
        return 0
    if not math.isfinite(number):
        return 0
    return math.floor(number)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def total_pages_for(total_count: int, count: int) -> int:
    """Number of pages for `total_count` items at `count` per page."""
    return max(1, _round_half_up(total_count / count))


def derive_count(default_count: int, requested_count: Any, sequence_length: int) -> int:
    """
    Resolve the page size for a sequence.

    Args:
        default_count:   Resource-specific default (e.g. 5 countries, 7 continents)
        requested_count: Raw caller value (int, float, numeric string, None, garbage)
        sequence_length: Number of items to paginate

    Returns:
        The requested count floored to an int, `default_count` when that is
        not a positive number, clamped to `sequence_length`.

    Raises:
        ArgumentsRequiredError: `default_count` is falsy or the sequence is empty.
    """
    if not default_count or not sequence_length:
        raise ArgumentsRequiredError(
            context={"default_count": default_count, "sequence_length": sequence_length}
        )

    count = coerce_int(requested_count)
    if count < 1:
        count = default_count
    if count > sequence_length:
        count = sequence_length
    return count


def paginate(sequence: Sequence[Any], count: int, requested_page: Any) -> Tuple[List[Any], int, int]:
    """
    Slice one page out of `sequence`.

    Args:
        sequence:       Ordered list/tuple, already filtered and sorted
        count:          Items per page, already clamped by derive_count()
        requested_page: Raw caller value; missing/invalid/non-positive → 1,
                        beyond the last page → last page

    Returns:
        (page_slice, total_pages, resolved_page). The last page may hold
        fewer than `count` items.

    Raises:
        InvalidPaginationInputError: `sequence` is not a list/tuple or
            `count` is not a positive integer.
    """
    if not isinstance(sequence, (list, tuple)):
        raise InvalidPaginationInputError(context={"type": type(sequence).__name__})
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidPaginationInputError(
            message="Page size must be a positive integer",
            context={"count": count},
        )

    total_pages = total_pages_for(len(sequence), count)

    page = coerce_int(requested_page)
    if page < 1:
        page = DEFAULT_PAGE
    elif page > total_pages:
        page = total_pages

    start = (page - 1) * count
    end = page * count
    return list(sequence[start:end]), total_pages, page


def build_page(
    sequence: Sequence[Any],
    default_count: int,
    requested_count: Any,
    requested_page: Any,
) -> PageResponse:
    """
    derive_count() + paginate() folded into the list envelope.

    `totalCount` is the length of `sequence` before slicing.
    """
    count = derive_count(default_count, requested_count, len(sequence))
    data, total_pages, page = paginate(sequence, count, requested_page)
    return PageResponse(
        page=page,
        totalPages=total_pages,
        count=count,
        totalCount=len(sequence),
        data=data,
    )
