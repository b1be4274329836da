"""Insight report generation for submitted entries."""

from tradejournal.analysis.sentiment import KEY_WORD_LIMIT, SentimentScorer, format_key_words, key_words
from tradejournal.models import Insight, JournalEntry, Sentiment

NEXT_STEPS = {
    Sentiment.POSITIVE: "Consider taking profits",
    Sentiment.NEGATIVE: "Monitor closely for exit opportunities",
    Sentiment.NEUTRAL: "Continue to observe market conditions",
}


def generate_insights(
    entry: JournalEntry,
    scorer: SentimentScorer,
    key_word_limit: int = KEY_WORD_LIMIT,
) -> Insight:
    """Build the insight report for an entry.

    Args:
        entry: The submitted journal entry.
        scorer: Scorer used to classify the entry's notes and voice input.
        key_word_limit: Maximum number of key words to sample.

    Returns:
        Insight for the entry.
    """
    text = entry.combined_text
    sentiment = scorer.classify(text)
    words = key_words(text, limit=key_word_limit)

    voice_analysis = None
    if entry.voice_input:
        voice_analysis = (
            f"The trader's voice input suggests {sentiment.value.lower()} sentiment. "
            f"Key points mentioned: {format_key_words(words)}. "
            f"This aligns with the {entry.action.value} action taken on {entry.symbol}."
        )

    return Insight(
        entry_id=entry.id,
        sentiment=sentiment,
        key_words=words,
        action_summary=(
            f"{entry.action.value} {entry.quantity} shares of {entry.symbol} at ${entry.price:.2f}"
        ),
        next_step=NEXT_STEPS[sentiment],
        voice_analysis=voice_analysis,
    )
