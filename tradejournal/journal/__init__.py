"""In-memory journal state and controller."""

from tradejournal.journal.controller import JournalController
from tradejournal.journal.state import (
    EntryDraft,
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

__all__ = [
    "EntryDraft",
    "JournalController",
    "JournalState",
    "RecordingStarted",
    "RecordingStopped",
    "SelectTab",
    "SetField",
    "SetVoiceInput",
    "SubmitEntry",
    "Tab",
    "reduce",
]
