"""page/limit query parameters."""

import re

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(value: str | None) -> int | None:
    """Parse a leading integer ("12abc" -> 12), None when there is none."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def page_window(
    page: str | None, limit: str | None, default_limit: int, max_limit: int
) -> tuple[int, int]:
    """Translate page/limit query values into (limit, offset).

    Missing, non-numeric or out-of-range values fall back to page 1 and
    the endpoint's default limit.

    Args:
        page: 1-based page number as sent
        limit: Page size as sent
        default_limit: Endpoint default page size
        max_limit: Largest accepted page size

    Returns:
        Tuple of (limit, offset)
    """
    page_number = _parse_int(page)
    if page_number is None or page_number < 1:
        page_number = 1

    size = _parse_int(limit)
    if size is None or size < 1 or size > max_limit:
        size = default_limit

    return size, (page_number - 1) * size
