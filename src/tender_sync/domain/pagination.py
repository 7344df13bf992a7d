from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WINDOW_SIZE = 10


def window_for(current: int, total_pages: int, window_size: int = DEFAULT_WINDOW_SIZE) -> list[int]:
    """
    Page numbers to render as buttons, centered on ``current``.

    The window is clamped at both edges and holds ``window_size`` contiguous
    pages, or fewer only when ``total_pages < window_size``. ``current`` is
    not corrected here; callers clamp it to ``[1, total_pages]`` first.

    Args:
        current: Current page number
        total_pages: Number of pages in the result set
        window_size: Maximum number of page buttons

    Returns:
        Strictly increasing page numbers (empty when there are no pages)

    Raises:
        ValueError: If window_size is not positive
    """
    if window_size <= 0:
        raise ValueError("window_size must be > 0")
    if total_pages <= 0:
        return []

    start = max(1, current - window_size // 2)
    end = min(total_pages, start + window_size - 1)
    if end - start + 1 < window_size:
        start = max(1, end - window_size + 1)

    return list(range(start, end + 1))


@dataclass(frozen=True, slots=True)
class PageControls:
    """Everything a pagination bar needs: numbered buttons plus first/prev/next/last."""

    pages: tuple[int, ...]
    current: int
    first_page: int
    last_page: int
    has_previous: bool
    has_next: bool

    @property
    def visible(self) -> bool:
        # A single page needs no pagination bar.
        return self.last_page > 1


def page_controls(
    current: int, total_pages: int, window_size: int = DEFAULT_WINDOW_SIZE
) -> PageControls:
    return PageControls(
        pages=tuple(window_for(current, total_pages, window_size)),
        current=current,
        first_page=1,
        last_page=total_pages,
        has_previous=current > 1,
        has_next=current < total_pages,
    )
