"""
Tests for summary, flashcard and quiz generation.
"""

import asyncio
import json

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from langchain_core.language_models.fake_chat_models import FakeListChatModel

from studytube.config import Config, LLMConfig, LLMDisabled
from studytube.core.errors import LLMOutputError
from studytube.core.generator import ContentGenerator, validate_flashcards, validate_quiz_questions
from studytube.models.schemas import Difficulty, GenerationSource

TITLE = "JavaScript DOM Tutorial"

VALID_QUESTION = {
    "question": "Which method attaches an event handler to an element?",
    "options": ["addEventListener", "appendChild", "setAttribute", "createElement"],
    "correct_answer": "addEventListener",
    "explanation": "addEventListener registers a callback for an event.",
}


def _generator(*responses):
    return ContentGenerator(FakeListChatModel(responses=list(responses)))


def test_from_config_without_llm():
    generator = ContentGenerator.from_config(Config(llm=LLMDisabled()))

    assert generator.llm is None


@patch("studytube.core.llm.init_chat_model")
def test_from_config_with_llm(mock_init):
    """Test that the configured provider and model are passed through."""
    mock_init.return_value = MagicMock()
    config = Config(llm=LLMConfig(api_key="test-key", model="llama-3.1-8b-instant"))

    generator = ContentGenerator.from_config(config)

    assert generator.llm is mock_init.return_value
    mock_init.assert_called_once_with(
        model="llama-3.1-8b-instant",
        model_provider="groq",
        temperature=0.3,
        max_tokens=4000,
        api_key="test-key",
    )


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

def test_summary_without_llm(dom_transcript):
    summary = asyncio.run(ContentGenerator().generate_summary(dom_transcript, TITLE))

    assert summary.startswith(f"Summary of \"{TITLE}\": This video covers educational content")


def test_summary_with_llm(dom_transcript):
    summary = asyncio.run(_generator("  The video explains DOM selection.  ").generate_summary(dom_transcript, TITLE))

    assert summary == "The video explains DOM selection."


def test_summary_llm_failure(dom_transcript):
    """Test that a failing model call degrades to the fallback summary."""
    generator = ContentGenerator(MagicMock())

    with patch.object(ContentGenerator, "_complete", AsyncMock(side_effect=RuntimeError("rate limited"))):
        summary = asyncio.run(generator.generate_summary(dom_transcript, TITLE))

    assert summary.startswith(f"Summary of \"{TITLE}\": This educational video provides comprehensive coverage")


def test_summary_empty_llm_output(dom_transcript):
    summary = asyncio.run(_generator("   ").generate_summary(dom_transcript, TITLE))

    assert "comprehensive coverage" in summary


# ---------------------------------------------------------------------------
# Flashcards
# ---------------------------------------------------------------------------

def test_flashcards_from_llm(dom_transcript):
    """Test that valid cards are kept, invalid ones dropped, and the batch truncated."""
    reply = json.dumps([
        {"question": "What does querySelector return?", "answer": "The first element matching the CSS selector."},
        {"question": "Too short", "answer": "An answer that is long enough."},
        {"question": "What is textContent used for?", "answer": "short"},
        {"question": "What does addEventListener do?", "answer": "It registers a callback for an event type."},
        {"question": "How do you select by id?", "answer": "With document.getElementById and the id string."},
    ])

    result = asyncio.run(_generator(reply).generate_flashcards(dom_transcript, TITLE, 2, Difficulty.HARD))

    assert result.source == GenerationSource.LLM
    assert [card.question for card in result.cards] == [
        "What does querySelector return?",
        "What does addEventListener do?",
    ]
    assert all(card.difficulty == Difficulty.HARD for card in result.cards)


def test_flashcards_from_llm_may_return_fewer(dom_transcript):
    reply = '[{"question": "What does querySelector return?", "answer": "The first matching element in the document."}]'

    result = asyncio.run(_generator(reply).generate_flashcards(dom_transcript, TITLE, 5, Difficulty.EASY))

    assert result.source == GenerationSource.LLM
    assert len(result.cards) == 1


@pytest.mark.parametrize("reply", [
    "Sorry, I can't help with that.",
    '[{"question": "short", "answer": "tiny"}]',
])
def test_flashcards_fall_back_to_templates(dom_transcript, reply):
    """Test that unusable replies produce exactly `count` template cards."""
    result = asyncio.run(_generator(reply).generate_flashcards(dom_transcript, TITLE, 7, Difficulty.MEDIUM))

    assert result.source == GenerationSource.TEMPLATE
    assert len(result.cards) == 7
    assert result.cards[0].question.startswith("[MEDIUM] ")


def test_flashcards_without_llm(dom_transcript):
    result = asyncio.run(ContentGenerator().generate_flashcards(dom_transcript, TITLE, 10, Difficulty.EASY))

    assert result.source == GenerationSource.TEMPLATE
    assert len(result.cards) == 10


def test_flashcards_llm_error(dom_transcript):
    generator = ContentGenerator(MagicMock())

    with patch.object(ContentGenerator, "_complete", AsyncMock(side_effect=LLMOutputError("bad"))):
        result = asyncio.run(generator.generate_flashcards(dom_transcript, TITLE, 4, Difficulty.EASY))

    assert result.source == GenerationSource.TEMPLATE
    assert len(result.cards) == 4


# ---------------------------------------------------------------------------
# Quiz
# ---------------------------------------------------------------------------

def test_quiz_from_llm(dom_transcript):
    reply = "```json\n" + json.dumps([VALID_QUESTION]) + "\n```"

    result = asyncio.run(_generator(reply).generate_quiz(dom_transcript, TITLE, 3, Difficulty.MEDIUM))

    assert result.source == GenerationSource.LLM
    assert len(result.questions) == 1
    assert result.questions[0].correct_answer == "addEventListener"


def test_quiz_missing_option_falls_back_to_templates(dom_transcript):
    """Test that a question with three options is rejected and templates fill the quiz."""
    broken = dict(VALID_QUESTION, options=VALID_QUESTION["options"][:3])

    result = asyncio.run(_generator(json.dumps([broken])).generate_quiz(dom_transcript, TITLE, 5, Difficulty.HARD))

    assert result.source == GenerationSource.TEMPLATE
    assert len(result.questions) == 5
    assert all(q.correct_answer in q.options for q in result.questions)


def test_quiz_llm_exception(dom_transcript):
    generator = ContentGenerator(MagicMock())

    with patch.object(ContentGenerator, "_complete", AsyncMock(side_effect=TimeoutError("slow"))):
        result = asyncio.run(generator.generate_quiz(dom_transcript, TITLE, 2, Difficulty.EASY))

    assert result.source == GenerationSource.TEMPLATE
    assert len(result.questions) == 2


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("change", [
    {"options": ["A option", "B option", "C option"]},
    {"options": ["Same", "Same", "Other", "Another"]},
    {"options": ["A option", "", "C option", "D option"]},
    {"correct_answer": "Not among the options"},
    {"explanation": ""},
    {"question": "Short?"},
])
def test_validate_quiz_questions_rejects(change):
    assert validate_quiz_questions([dict(VALID_QUESTION, **change)]) == []


def test_validate_quiz_questions_accepts():
    questions = validate_quiz_questions([VALID_QUESTION])

    assert len(questions) == 1
    assert questions[0].options == VALID_QUESTION["options"]


def test_validate_flashcards_uses_requested_difficulty():
    records = [{
        "question": "What is the DOM tree?",
        "answer": "A hierarchy of nodes representing the page.",
        "difficulty": "easy",
    }]

    cards = validate_flashcards(records, Difficulty.HARD)

    assert cards[0].difficulty == Difficulty.HARD
