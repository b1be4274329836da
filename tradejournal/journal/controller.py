"""Journal controller owning the session state."""

import logging
from datetime import datetime
from typing import Optional

from tradejournal.analysis.positions import PositionAggregator
from tradejournal.analysis.sentiment import KEY_WORD_LIMIT, SentimentScorer
from tradejournal.capture.session import CaptureSession
from tradejournal.journal.state import (
    Action,
    JournalState,
    RecordingStarted,
    RecordingStopped,
    SelectTab,
    SetField,
    SetVoiceInput,
    SubmitEntry,
    Tab,
    reduce,
)
from tradejournal.models import JournalEntry, PositionSummary

logger = logging.getLogger(__name__)


class JournalController:
    """Applies user actions to the journal state.

    The controller is the only owner of the state; views read it through
    ``state`` and the query methods.
    """

    def __init__(
        self,
        scorer: Optional[SentimentScorer] = None,
        capture: Optional[CaptureSession] = None,
        aggregator: Optional[PositionAggregator] = None,
        key_word_limit: int = KEY_WORD_LIMIT,
    ):
        self.scorer = scorer or SentimentScorer()
        self.capture = capture or CaptureSession()
        self.aggregator = aggregator or PositionAggregator()
        self.key_word_limit = key_word_limit
        self._state = JournalState()

    @property
    def state(self) -> JournalState:
        return self._state

    def dispatch(self, action: Action) -> JournalState:
        self._state = reduce(self._state, action, self.scorer, self.key_word_limit)
        return self._state

    def set_field(self, name: str, value: str) -> JournalState:
        return self.dispatch(SetField(name=name, value=value))

    def set_voice_input(self, text: str) -> JournalState:
        return self.dispatch(SetVoiceInput(text=text))

    def start_recording(self) -> bool:
        """Start voice capture; returns False when capture is unsupported."""
        if not self.capture.start():
            return False
        self.dispatch(RecordingStarted())
        return True

    def stop_recording(self) -> str:
        """Stop voice capture and attach the transcript to the draft."""
        if not self._state.recording:
            self.capture.stop()
            return self._state.voice_input
        transcript = self.capture.stop()
        self.dispatch(RecordingStopped(transcript=transcript))
        return transcript

    def submit(self, created_at: Optional[datetime] = None) -> JournalEntry:
        """Record the current draft as a journal entry.

        Raises:
            pydantic.ValidationError: If the draft is incomplete or invalid.
        """
        action = SubmitEntry(created_at=created_at) if created_at else SubmitEntry()
        state = self.dispatch(action)
        entry = state.entries[0]
        logger.info(
            "Recorded entry #%d: %s %d %s @ %.2f",
            entry.id,
            entry.action.value,
            entry.quantity,
            entry.symbol,
            entry.price,
        )
        return entry

    def select_tab(self, tab: Tab) -> JournalState:
        return self.dispatch(SelectTab(tab=tab))

    def performance(self) -> list[PositionSummary]:
        return self.aggregator.summarize(self._state.entries)

    def history(self) -> tuple[JournalEntry, ...]:
        return self._state.entries
