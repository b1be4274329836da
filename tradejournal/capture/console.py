"""Console dictation backend.

Stands in for a microphone in a terminal: each line read from the input
stream is treated as a spoken phrase. A blank line or end of input ends
the dictation.
"""

import sys
from typing import Optional, TextIO

from tradejournal.capture.base import CaptureBackend, RecognitionResult, ResultCallback


class ConsoleDictationBackend(CaptureBackend):
    """Reads dictated phrases line by line from a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, enabled: bool = True):
        self._stream = stream
        self._enabled = enabled
        self._results: list[RecognitionResult] = []
        self._on_result: Optional[ResultCallback] = None

    def is_available(self) -> bool:
        return self._enabled

    def start(self, on_result: ResultCallback) -> None:
        self._results = []
        self._on_result = on_result

    def stop(self) -> None:
        self._on_result = None

    def listen(self) -> int:
        """Read phrases until a blank line and deliver them.

        Each phrase is delivered once as interim and then as final text.

        Returns:
            Number of phrases delivered.
        """
        stream = self._stream or sys.stdin
        count = 0
        while True:
            line = stream.readline()
            phrase = line.strip()
            if not phrase:
                break
            if count:
                phrase = " " + phrase
            self.deliver(phrase)
            count += 1
        return count

    def deliver(self, phrase: str) -> None:
        """Push a phrase to the active recording."""
        if self._on_result is None:
            return
        index = len(self._results)
        self._on_result(self._results + [RecognitionResult(transcript=phrase, is_final=False)], index)
        self._results.append(RecognitionResult(transcript=phrase, is_final=True))
        self._on_result(list(self._results), 0)
