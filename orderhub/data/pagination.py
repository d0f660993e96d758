"""
Offset pagination emulated over forward-only cursors.

The store has no skip/offset: each read returns at most `limit` items plus
an opaque continuation token. A 1-based (page, page_size) window is served
by discarding the first (page - 1) * page_size items across reads, then
collecting up to page_size more. Cost is linear in `page`.
"""
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Generic, List, Optional, TypeVar

from orderhub.domain.exceptions import OrderValidationError

from .stores.interface import ReadResult


T = TypeVar("T")

FetchPage = Callable[[Optional[str], int], Awaitable[ReadResult]]


@dataclass
class PageWindow(Generic[T]):
    """Collected page plus the last continuation token seen."""

    items: List[T] = field(default_factory=list)
    last_token: Optional[str] = None
    has_next_page: bool = False


async def paginate(
    fetch_page: FetchPage,
    page: int,
    page_size: int,
    transform: Optional[Callable[[object], T]] = None,
) -> PageWindow:
    """Collect one page by repeatedly calling `fetch_page(token, limit)`.

    Args:
        fetch_page: Coroutine performing one bounded read from a token
        page: 1-based page number
        page_size: Window size, also used as the per-read limit
        transform: Optional mapping applied to each collected item

    Returns:
        PageWindow. has_next_page is approximate: true only when the window
        is full and a continuation token remained after collecting it.

    Raises:
        OrderValidationError: page or page_size below 1
    """
    if page < 1:
        raise OrderValidationError("page must be >= 1")
    if page_size < 1:
        raise OrderValidationError("page_size must be >= 1")

    to_skip = (page - 1) * page_size
    skipped = 0
    collected: List[T] = []
    token: Optional[str] = None

    while True:
        result = await fetch_page(token, page_size)

        for item in result.items:
            if skipped < to_skip:
                skipped += 1
                continue
            if len(collected) >= page_size:
                break
            collected.append(transform(item) if transform else item)

        token = result.next_token
        if len(collected) >= page_size or token is None:
            break

    return PageWindow(
        items=collected,
        last_token=token,
        has_next_page=len(collected) == page_size and token is not None,
    )
