"""Page-step viewport arithmetic for the list panel.

A page move shifts the absolute row under the cursor by one viewport height,
then picks a cursor/origin pair from one of three scroll regions:

- head: near the top, the origin stays at 0 and the cursor tracks the target;
- tail: near the bottom, the buffer end is pinned to the viewport bottom;
- body: otherwise the cursor stays centered and the origin scrolls.

These are pure functions over row numbers; no panel objects are involved.
"""

from __future__ import annotations

from dataclasses import dataclass

from .items import MonitorError

REGION_HEAD = "head"
REGION_BODY = "body"
REGION_TAIL = "tail"


@dataclass(frozen=True)
class PageShift:
    """Result of one page step, in rows relative to the list buffer."""

    target: int
    region: str
    cursor_y: int
    origin_y: int
    clamped_origin: bool = False

    @property
    def absolute(self) -> int:
        return self.origin_y + self.cursor_y


def clamp_page_target(count: int, vy: int, absolute: int, nb: int) -> int:
    """Return ``absolute`` shifted by ``nb`` pages and clamped to ``[0, count]``."""
    return max(0, min(count, absolute + nb * vy))


def compute_page_shift(count: int, vy: int, origin_y: int, cursor_y: int, nb: int) -> PageShift:
    """Compute the list viewport after moving ``nb`` pages (``-1`` up, ``+1`` down).

    ``count`` is the number of buffer rows and ``vy`` the viewport height.
    In the tail region the origin is ``count - vy``; when the list is shorter
    than the viewport that would be negative, so the origin is clamped to 0
    and the cursor lands on the same row the unclamped pair points at. The
    centred body origin is clamped to ``count - vy`` the same way, which only
    matters for odd heights.
    """
    half = vy // 2
    target = clamp_page_target(count, vy, origin_y + cursor_y, nb)

    if target < half:
        return PageShift(target=target, region=REGION_HEAD, cursor_y=target, origin_y=0)

    if target > count - half:
        origin = count - vy
        if origin >= 0:
            return PageShift(
                target=target,
                region=REGION_TAIL,
                cursor_y=vy - (count - target) - 1,
                origin_y=origin,
            )
        return PageShift(
            target=target,
            region=REGION_TAIL,
            cursor_y=max(0, target - 1),
            origin_y=0,
            clamped_origin=True,
        )

    origin = target - half
    limit = max(0, count - vy)
    if origin <= limit:
        return PageShift(target=target, region=REGION_BODY, cursor_y=half, origin_y=origin)
    # Odd heights leave one row more below the centre than above it.
    return PageShift(
        target=target,
        region=REGION_BODY,
        cursor_y=min(vy - 1, target - limit),
        origin_y=limit,
        clamped_origin=True,
    )


class ViewportError(MonitorError):
    """A computed cursor/origin pair was rejected by the panel it targets."""
