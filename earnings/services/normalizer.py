"""
Rate-block normalization.

Turns a shift's declared rate segments into concrete, time-ordered blocks
bounded by an evaluation boundary.
"""

import logging
from datetime import datetime
from typing import List

from .contracts import ZERO, ConcreteBlock, Shift

logger = logging.getLogger(__name__)


def normalize_blocks(shift: Shift, boundary: datetime) -> List[ConcreteBlock]:
    """
    Resolve the shift's rate segments against ``boundary``.

    A shift without segments yields one unrated block (rate 0) covering
    [shift.start, boundary], so callers must not assume nonzero pay.

    Otherwise each segment's open end resolves to the boundary and is
    clipped to it. Segments whose clipped end is not strictly after their
    start are dropped. Survivors are sorted by start. Gaps are left as
    gaps and overlaps are kept as authored, so overlapping segments pay
    their shared hours twice.

    Args:
        shift: Shift snapshot
        boundary: Evaluation instant (shift end or "now")

    Returns:
        List[ConcreteBlock]: Blocks in chronological order
    """
    if not shift.rate_segments:
        return [
            ConcreteBlock(
                start=shift.start, end=boundary, rate_per_hour=ZERO, multiplier=1.0
            )
        ]

    blocks = []
    dropped = 0
    for segment in shift.rate_segments:
        end = segment.end if segment.end is not None else boundary
        end = min(end, boundary)
        if end <= segment.start:
            dropped += 1
            continue
        blocks.append(
            ConcreteBlock(
                start=segment.start,
                end=end,
                rate_per_hour=segment.rate_per_hour,
                multiplier=segment.multiplier,
            )
        )

    if dropped:
        logger.debug(
            "Dropped empty rate segments during normalization",
            extra={
                "dropped_segments": dropped,
                "kept_segments": len(blocks),
                "action": "rate_segments_dropped",
            },
        )

    blocks.sort(key=lambda block: block.start)
    return blocks
