"""Journal application state and the reducer that updates it.

State is immutable: every user action is described by an action object and
``reduce`` returns the next state. Entries are only ever prepended.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

from tradejournal.analysis.insights import generate_insights
from tradejournal.analysis.sentiment import KEY_WORD_LIMIT, SentimentScorer
from tradejournal.models import Insight, JournalEntry


class Tab(str, Enum):
    """Views of the journal."""

    JOURNAL = "journal"
    INSIGHTS = "insights"
    PERFORMANCE = "performance"
    HISTORY = "history"


class EntryDraft(BaseModel):
    """Raw form fields of the entry being written."""

    date: str = ""
    symbol: str = ""
    action: str = ""
    price: str = ""
    quantity: str = ""
    notes: str = ""

    model_config = {"frozen": True}


DRAFT_FIELDS = tuple(EntryDraft.model_fields)


class JournalState(BaseModel):
    """Complete state of a journal session."""

    entries: tuple[JournalEntry, ...] = Field(default=(), description="Entries, newest first")
    draft: EntryDraft = Field(default_factory=EntryDraft)
    voice_input: str = Field(default="", description="Transcript attached to the draft")
    recording: bool = False
    active_tab: Tab = Tab.JOURNAL
    insight: Optional[Insight] = None
    next_id: int = Field(default=1, ge=1)

    model_config = {"frozen": True}


@dataclass(frozen=True)
class SetField:
    name: str
    value: str


@dataclass(frozen=True)
class SetVoiceInput:
    text: str


@dataclass(frozen=True)
class RecordingStarted:
    pass


@dataclass(frozen=True)
class RecordingStopped:
    transcript: str


@dataclass(frozen=True)
class SubmitEntry:
    created_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True)
class SelectTab:
    tab: Tab


Action = Union[SetField, SetVoiceInput, RecordingStarted, RecordingStopped, SubmitEntry, SelectTab]


def build_entry(state: JournalState, created_at: datetime) -> JournalEntry:
    """Validate the draft into a journal entry.

    Raises:
        pydantic.ValidationError: If a required field is missing or a
            number is not positive.
    """
    draft = state.draft
    return JournalEntry(
        id=state.next_id,
        date=draft.date.strip(),
        symbol=draft.symbol.strip(),
        action=draft.action.strip().lower(),
        price=draft.price.strip(),
        quantity=draft.quantity.strip(),
        notes=draft.notes,
        voice_input=state.voice_input,
        created_at=created_at,
    )


def reduce(
    state: JournalState,
    action: Action,
    scorer: Optional[SentimentScorer] = None,
    key_word_limit: int = KEY_WORD_LIMIT,
) -> JournalState:
    """Return the state that results from applying an action.

    Args:
        state: Current state.
        action: Action to apply.
        scorer: Scorer used for insights on submit.
        key_word_limit: Number of key words sampled for insights.

    Raises:
        ValueError: If a SetField names an unknown field.
        pydantic.ValidationError: If a SubmitEntry draft is invalid.
    """
    if isinstance(action, SetField):
        if action.name not in DRAFT_FIELDS:
            raise ValueError(f"Unknown entry field: {action.name}")
        draft = state.draft.model_copy(update={action.name: action.value})
        return state.model_copy(update={"draft": draft})

    if isinstance(action, SetVoiceInput):
        return state.model_copy(update={"voice_input": action.text})

    if isinstance(action, RecordingStarted):
        return state.model_copy(update={"recording": True})

    if isinstance(action, RecordingStopped):
        return state.model_copy(update={"recording": False, "voice_input": action.transcript})

    if isinstance(action, SubmitEntry):
        entry = build_entry(state, action.created_at)
        insight = generate_insights(entry, scorer or SentimentScorer(), key_word_limit)
        return state.model_copy(
            update={
                "entries": (entry,) + state.entries,
                "draft": EntryDraft(),
                "voice_input": "",
                "insight": insight,
                "next_id": state.next_id + 1,
            }
        )

    if isinstance(action, SelectTab):
        return state.model_copy(update={"active_tab": Tab(action.tab)})

    raise TypeError(f"Unsupported action: {action!r}")
