"""Capture session wrapping a speech-to-text backend."""

import logging
from typing import Optional

from tradejournal.capture.base import CaptureBackend, RecognitionResult

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = "Speech recognition is not supported in this environment."


class CaptureSession:
    """Start/stop wrapper exposing only the final transcript.

    Interim results are buffered internally; callers read the transcript
    once recording stops. When no usable backend exists the session stays
    inert and reports the fact once.
    """

    def __init__(self, backend: Optional[CaptureBackend] = None):
        self._backend = backend
        self._recording = False
        self._transcript = ""
        self._final_transcript = ""
        self._warned = False

    @property
    def backend(self) -> Optional[CaptureBackend]:
        return self._backend

    @property
    def supported(self) -> bool:
        return self._backend is not None and self._backend.is_available()

    @property
    def recording(self) -> bool:
        return self._recording

    @property
    def final_transcript(self) -> str:
        """Transcript captured by the last completed recording."""
        return self._final_transcript

    def _report_unsupported(self) -> None:
        if not self._warned:
            logger.warning(UNSUPPORTED_MESSAGE)
            self._warned = True

    def start(self) -> bool:
        """Begin recording.

        Returns:
            True if recording is in progress after the call.
        """
        if not self.supported:
            self._report_unsupported()
            return False
        if self._recording:
            return True

        self._transcript = ""
        self._backend.start(self.handle_results)
        self._recording = True
        logger.debug("Capture started")
        return True

    def stop(self) -> str:
        """Stop recording and return the latest transcript."""
        if not self.supported:
            self._report_unsupported()
            return ""
        if not self._recording:
            return self._final_transcript

        self._backend.stop()
        self._recording = False
        self._final_transcript = self._transcript
        logger.debug("Capture stopped (%d chars)", len(self._final_transcript))
        return self._final_transcript

    def listen(self) -> int:
        """Collect speech for the active recording.

        Returns:
            Number of phrases delivered, 0 when not recording.
        """
        if not self._recording:
            return 0
        return self._backend.listen()

    def handle_results(self, results: list[RecognitionResult], result_index: int = 0) -> None:
        """Buffer results delivered by the backend.

        Settled text wins over interim text; interim text is kept only while
        nothing has settled.
        """
        final = ""
        interim = ""
        for result in results[result_index:]:
            if result.is_final:
                final += result.transcript
            else:
                interim += result.transcript
        self._transcript = final or interim
