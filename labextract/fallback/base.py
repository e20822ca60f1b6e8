from abc import ABC, abstractmethod


class BaseMarkerFallback(ABC):
    """Contract for non-deterministic marker extraction used after pattern matching."""

    @abstractmethod
    def extract_markers(self, text: str) -> list[dict[str, object]]:
        """Return raw marker dicts found in redacted report text.

        The dicts are untrusted; callers validate them before use.

        Raises:
            FallbackError: on any failure.
        """
