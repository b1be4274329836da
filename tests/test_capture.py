"""Tests for the capture session and console dictation backend.

**Feature: trade-journal**
"""

import io
import logging

from hypothesis import given, settings
from hypothesis import strategies as st

from tradejournal.capture import CaptureSession, ConsoleDictationBackend, RecognitionResult
from tradejournal.capture.base import CaptureBackend
from tradejournal.capture.session import UNSUPPORTED_MESSAGE


class ScriptedBackend(CaptureBackend):
    """Backend whose results are pushed by the test."""

    def __init__(self, available: bool = True):
        self.available = available
        self.callback = None
        self.started = 0
        self.stopped = 0
        self.phrases = []

    def is_available(self) -> bool:
        return self.available

    def start(self, on_result) -> None:
        self.callback = on_result
        self.started += 1

    def stop(self) -> None:
        self.callback = None
        self.stopped += 1

    def listen(self) -> int:
        results = []
        for phrase in self.phrases:
            results.append(final(phrase))
            self.callback(list(results), 0)
        return len(self.phrases)


def final(text: str) -> RecognitionResult:
    return RecognitionResult(transcript=text, is_final=True)


def interim(text: str) -> RecognitionResult:
    return RecognitionResult(transcript=text, is_final=False)


class TestTranscriptBuffering:
    """Final text wins over interim text; only the stopped transcript is exposed."""

    def test_final_over_interim(self):
        backend = ScriptedBackend()
        session = CaptureSession(backend)

        assert session.start()
        backend.callback([final("bought the dip"), interim(" feeling")], 0)
        transcript = session.stop()

        assert transcript == "bought the dip"
        assert session.final_transcript == "bought the dip"
        assert not session.recording

    def test_interim_used_when_nothing_final(self):
        backend = ScriptedBackend()
        session = CaptureSession(backend)

        session.start()
        backend.callback([interim("still "), interim("talking")], 0)

        assert session.stop() == "still talking"

    def test_result_index_skips_earlier_results(self):
        backend = ScriptedBackend()
        session = CaptureSession(backend)

        session.start()
        backend.callback([final("one"), final(" two")], 1)

        assert session.stop() == " two"

    def test_start_clears_previous_transcript(self):
        backend = ScriptedBackend()
        session = CaptureSession(backend)

        session.start()
        backend.callback([final("first take")], 0)
        session.stop()
        session.start()

        assert session.stop() == ""

    def test_double_start_and_idle_stop_are_noops(self):
        backend = ScriptedBackend()
        session = CaptureSession(backend)

        assert session.stop() == ""
        session.start()
        session.start()
        session.stop()
        session.stop()

        assert backend.started == 1
        assert backend.stopped == 1

    def test_listen_delegates_while_recording(self):
        backend = ScriptedBackend()
        backend.phrases = ["took profit", " on the gap up"]
        session = CaptureSession(backend)

        assert session.listen() == 0
        session.start()

        assert session.listen() == 2
        assert session.stop() == "took profit on the gap up"

    @given(phrases=st.lists(st.text(min_size=1, max_size=20), min_size=1, max_size=10))
    @settings(max_examples=50)
    def test_all_final_phrases_concatenate(self, phrases):
        backend = ScriptedBackend()
        session = CaptureSession(backend)

        session.start()
        results = []
        for phrase in phrases:
            results.append(final(phrase))
            backend.callback(list(results), 0)

        assert session.stop() == "".join(phrases)


class TestUnsupportedCapture:
    """
    **Feature: trade-journal, Property 5: Unsupported Capture Is Inert**

    Without a usable backend the session never records and warns once.
    """

    def test_no_backend(self, caplog):
        session = CaptureSession()

        with caplog.at_level(logging.WARNING, logger="tradejournal.capture.session"):
            assert session.start() is False
            assert session.stop() == ""
            assert session.start() is False

        assert not session.recording
        warnings = [r for r in caplog.records if r.getMessage() == UNSUPPORTED_MESSAGE]
        assert len(warnings) == 1

    def test_unavailable_backend(self):
        backend = ScriptedBackend(available=False)
        session = CaptureSession(backend)

        assert session.start() is False
        assert backend.started == 0
        assert not session.supported


class TestConsoleDictation:
    """Console backend feeding a session."""

    def test_listen_until_blank_line(self):
        stream = io.StringIO("great entry\nfeeling confident\n\nignored\n")
        backend = ConsoleDictationBackend(stream=stream)
        session = CaptureSession(backend)

        session.start()
        count = backend.listen()

        assert count == 2
        assert session.stop() == "great entry feeling confident"
        assert stream.readline() == "ignored\n"

    def test_listen_until_end_of_input(self):
        backend = ConsoleDictationBackend(stream=io.StringIO("just one"))
        session = CaptureSession(backend)

        session.start()
        backend.listen()

        assert session.stop() == "just one"

    def test_deliver_without_recording_is_ignored(self):
        backend = ConsoleDictationBackend(stream=io.StringIO(""))
        backend.deliver("nobody listening")

    def test_disabled(self):
        session = CaptureSession(ConsoleDictationBackend(enabled=False))
        assert session.start() is False
