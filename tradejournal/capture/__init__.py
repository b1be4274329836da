"""Voice capture for TradeJournal."""

from tradejournal.capture.base import CaptureBackend, RecognitionResult
from tradejournal.capture.console import ConsoleDictationBackend
from tradejournal.capture.session import CaptureSession

__all__ = [
    "CaptureBackend",
    "CaptureSession",
    "ConsoleDictationBackend",
    "RecognitionResult",
]
