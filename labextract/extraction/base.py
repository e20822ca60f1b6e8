from abc import ABC, abstractmethod
from collections.abc import Sequence

from labextract.extraction.models import RawMeasurement


class BaseExtractionStrategy(ABC):
    """Contract for deterministic text extraction strategies."""

    name: str = "base"

    @abstractmethod
    def extract(
        self,
        text: str,
        existing: Sequence[RawMeasurement] = (),
    ) -> list[RawMeasurement]:
        """Find measurements in *text*.

        Args:
            text: Plain, already redacted report text.
            existing: Measurements produced by earlier strategies in the
                same pass, for strategies that skip duplicates.

        Returns:
            Measurements in the order they were found. Never raises for
            unmatched or malformed report content.
        """
