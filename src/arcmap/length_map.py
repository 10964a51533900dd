"""Precomputed per-segment length table of a spline or path."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from arcmap.consts import DEFAULT_STEP, PERCENT_FULL

logger = logging.getLogger(__name__)


###############################################################################
# SegmentLengthMap
###############################################################################
@dataclass(frozen=True)
class SegmentLengthMap:
    """
    Immutable table of estimated segment lengths of one spline or path.

    The map is built once by SplineMapper.build_map or PathMapper.build_map and then
    handed to every position query on the same points. It is a snapshot: if the
    points change, a new map has to be built.

    Attributes:
        lengths (Tuple[float, ...]): Length of each segment in segment order.
        step (float): Sampling step in percent the lengths were estimated with.
    """

    lengths: Tuple[float, ...]
    step: float = DEFAULT_STEP

    def __init__(self, lengths: Iterable[float], step: Optional[float] = DEFAULT_STEP):
        """Initialize SegmentLengthMap.

        Args:
            lengths: Length of each segment
            step: Sampling step in percent the lengths were estimated with
        """
        object.__setattr__(self, "lengths", tuple(float(length) for length in lengths))
        object.__setattr__(self, "step", float(step or DEFAULT_STEP))

    def __len__(self) -> int:
        """Number of segments."""
        return len(self.lengths)

    @property
    def length(self) -> float:
        """float: Total length of all segments."""
        return sum(self.lengths)

    def target_distance(self, shift: float) -> float:
        """Distance travelled along all segments after _shift_ percent of the total length."""
        if shift >= PERCENT_FULL:
            return self.length
        return self.length / PERCENT_FULL * shift

    def locate(self, shift: float) -> Tuple[int, float]:
        """
        Find the segment reached after _shift_ percent of the total length.

        Segments are consumed while the distance covered so far plus the next
        segment stays below the target distance. The first segment that would
        meet or exceed the target is the active one.

        Args:
            shift: Position in percent of the total length (0..100)

        Returns:
            Tuple[int, float]: index of the active segment and the shift in percent
            inside of that segment. A zero-length active segment yields shift 0.

        Raises:
            ValueError: If the map holds no segments
        """
        if not self.lengths:
            raise ValueError("Cannot locate a position in an empty length map")

        target = self.target_distance(shift)
        covered = 0.0
        index = 0
        while index < len(self.lengths) and covered + self.lengths[index] < target:
            covered += self.lengths[index]
            index += 1

        if index == len(self.lengths):
            index -= 1
            covered -= self.lengths[index]

        segment_length = self.lengths[index]
        if segment_length <= 0:
            return index, 0.0
        return index, (target - covered) / (segment_length / PERCENT_FULL)

    def validate_against(self, segment_count: int) -> None:
        """
        Check that this map belongs to points which split into _segment_count_ segments.

        Raises:
            ValueError: If the number of map entries differs from segment_count
        """
        if segment_count != len(self.lengths):
            logger.warning("Length map has %d entries but points form %d segments", len(self.lengths), segment_count)
            raise ValueError(
                f"Length map has {len(self.lengths)} entries but points form {segment_count} segments, "
                "rebuild the map after changing points"
            )

    @classmethod
    def from_dict(cls, data: dict) -> SegmentLengthMap:
        """Create a SegmentLengthMap instance from a dictionary."""
        return cls(lengths=data.get("lengths", ()), step=data.get("step", DEFAULT_STEP))

    def to_dict(self) -> dict:
        """Convert the SegmentLengthMap instance to a dictionary."""
        return {
            "lengths": list(self.lengths),
            "step": self.step,
            "length": self.length,
        }

    def __str__(self):
        """Returns a string representation of the SegmentLengthMap instance."""
        return f"SegmentLengthMap(segments={len(self)}, length={self.length}, step={self.step})"
