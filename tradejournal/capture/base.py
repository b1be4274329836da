"""Base speech capture interface for TradeJournal."""

from abc import ABC, abstractmethod
from typing import Callable

from pydantic import BaseModel, Field


class RecognitionResult(BaseModel):
    """A single recognized phrase delivered by a capture backend."""

    transcript: str = Field(..., description="Recognized text")
    is_final: bool = Field(default=False, description="Whether the phrase is settled")

    model_config = {"frozen": True}


ResultCallback = Callable[[list[RecognitionResult], int], None]


class CaptureBackend(ABC):
    """Abstract base class for speech-to-text backends.

    A backend delivers results through the callback passed to ``start``.
    Each call carries every result of the current recording plus the index
    of the first result that changed since the previous call.
    """

    @abstractmethod
    def is_available(self) -> bool:
        """Check whether speech capture is supported.

        Returns:
            True if the backend can record, False otherwise.
        """
        pass

    @abstractmethod
    def start(self, on_result: ResultCallback) -> None:
        """Begin capturing speech.

        Args:
            on_result: Called with (results, result_index) as speech is recognized.
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop capturing speech."""
        pass

    @abstractmethod
    def listen(self) -> int:
        """Block until the speaker finishes, delivering results as they arrive.

        Returns:
            Number of phrases delivered.
        """
        pass
