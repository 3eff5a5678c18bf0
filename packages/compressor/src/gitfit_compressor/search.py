"""
Size-constrained encoding search.

Finds the largest width whose encoding fits a byte budget:
1. Binary search over [min_width, original width]
2. Linear pass downwards from the phase 1 winner in 5% steps

Encoded size is not strictly monotonic in width (entropy coding has
local bumps), so phase 1 finds an approximation of the largest fitting
width rather than a proven optimum. Phase 2 always starts at the phase 1
winner, which already fit, so it re-confirms that width and returns it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from PIL import Image

from gitfit_shared.errors import BudgetUnattainable
from gitfit_shared.files import DEFAULT_MAX_SIZE, DEFAULT_QUALITY, MIN_WIDTH, is_valid_quality
from gitfit_shared.formats import ImageFormat

from .codec import resample

logger = logging.getLogger(__name__)

REFINE_FRACTION = 20


@dataclass(frozen=True)
class CompressionRequest:
    """Constraints for one search. Immutable for its duration."""

    format: ImageFormat
    quality: int = DEFAULT_QUALITY
    byte_budget: int = DEFAULT_MAX_SIZE
    min_width: int = MIN_WIDTH

    def __post_init__(self) -> None:
        if self.byte_budget <= 0:
            raise ValueError(f"byte_budget must be positive, got {self.byte_budget}")
        if self.min_width < 1:
            raise ValueError(f"min_width must be at least 1, got {self.min_width}")
        if not is_valid_quality(self.quality):
            raise ValueError(f"quality must be between 1 and 100, got {self.quality}")


@dataclass(frozen=True)
class Probe:
    """One width probe: the resample+encode result at a given width."""

    width: int
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class SizeSearch:
    """
    Two-phase search for the widest encoding under a byte budget.

    ``history`` records ``(phase, width, size)`` for every probe in the
    order they ran.
    """

    image: Image.Image
    request: CompressionRequest
    history: list[tuple[int, int, int]] = field(default_factory=list)

    def probe(self, width: int, phase: int) -> Probe:
        """Resample to ``width`` and encode. Encode failures abort the search."""
        resized = resample(self.image, width)
        data = self.request.format.encode(resized, self.request.quality)
        self.history.append((phase, width, len(data)))
        logger.debug("Trying width: %d -> Compressed size: %d bytes", width, len(data))
        return Probe(width=width, data=data)

    def fits(self, probe: Probe) -> bool:
        return probe.size <= self.request.byte_budget

    def binary_search(self) -> int:
        """Phase 1. Returns the best accepted width, or 0 if none fit."""
        low = self.request.min_width
        high = self.image.width
        best = 0

        while low <= high:
            mid = (low + high) // 2
            if self.fits(self.probe(mid, phase=1)):
                best = mid
                low = mid + 1
            else:
                high = mid - 1

        return best

    def refine(self, best: int) -> Probe:
        """Phase 2. Walk down from ``best`` and return the first fitting probe."""
        step = max(1, best // REFINE_FRACTION)
        for width in range(best, self.request.min_width - 1, -step):
            candidate = self.probe(width, phase=2)
            if self.fits(candidate):
                return candidate
        raise BudgetUnattainable(self.request.byte_budget, self.request.min_width)

    def run(self) -> Probe:
        """
        Execute both phases.

        Raises:
            BudgetUnattainable: No probed width fit the budget
            EncodeError: The encoder rejected a probe
        """
        best = self.binary_search()
        if best == 0:
            raise BudgetUnattainable(self.request.byte_budget, self.request.min_width)

        result = self.refine(best)
        logger.debug(
            "Selected width %d (%d bytes, budget %d) after %d probes",
            result.width, result.size, self.request.byte_budget, len(self.history),
        )
        return result
