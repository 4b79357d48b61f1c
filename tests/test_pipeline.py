"""
Tests for the processing pipeline and the command line entry point.
"""

import asyncio
import json
import sys

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from studytube.core import prompts
from studytube.core.errors import InvalidVideoURL, PersistenceError
from studytube.core.generator import ContentGenerator
from studytube.core.transcript import TranscriptStrategy
from studytube.db import crud
from studytube.db.models import Flashcard, Video
from studytube.main import main, process_youtube_video, run_once
from studytube.models.schemas import Difficulty, VideoMetadata

CAPTIONS = (
    "Today we learn how the DOM works. We select an element with querySelector, change its "
    "textContent and attach a click event with addEventListener so the page reacts to the user."
)

LLM_QUESTION = {
    "question": "Which method is used to react to clicks?",
    "options": ["addEventListener", "querySelector", "textContent", "innerHTML"],
    "correct_answer": "addEventListener",
    "explanation": "The video attaches a click handler with addEventListener.",
}


class StaticStrategy(TranscriptStrategy):
    name = "captions_api"

    def fetch(self, video_id):
        return CAPTIONS


async def fake_complete(template, **variables):
    if template is prompts.summary_template:
        return "The video shows DOM selection and event handling."
    if template is prompts.flashcard_template:
        return json.dumps([
            {"question": "What does querySelector do?", "answer": "It returns the first element matching a selector."},
            {"question": "What is textContent?", "answer": "The text of an element and all of its descendants."},
        ])
    return json.dumps([LLM_QUESTION])


@pytest.fixture
def metadata():
    with patch("studytube.main.fetch_video_metadata",
               return_value=VideoMetadata(title="DOM Basics", source="oembed")) as mock_metadata:
        yield mock_metadata


def test_pipeline_with_llm(db_session, config, metadata):
    """Test that model output and provenance are stored."""
    generator = ContentGenerator(MagicMock())

    with patch.object(ContentGenerator, "_complete", AsyncMock(side_effect=fake_complete)):
        result = asyncio.run(process_youtube_video(
            db_session,
            config,
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            flashcard_count=5,
            quiz_question_count=3,
            difficulty=Difficulty.MEDIUM,
            generator=generator,
            strategies=[StaticStrategy()],
        ))

    assert result.success
    assert result.video.title == "DOM Basics"
    assert result.video.transcript == CAPTIONS
    assert result.video.transcript_source == "captions_api"
    assert result.video.summary == "The video shows DOM selection and event handling."
    assert result.flashcards == 2
    assert result.quiz.generated_by == "llm"
    assert [q.question for q in result.quiz.quiz_questions] == [LLM_QUESTION["question"]]

    cards = crud.get_flashcards(db_session, result.video.id)
    assert {card.generated_by for card in cards} == {"llm"}
    assert {card.difficulty for card in cards} == {"medium"}
    metadata.assert_called_once_with("dQw4w9WgXcQ", "https://www.youtube.com/watch?v=dQw4w9WgXcQ", config.http_timeout)


def test_pipeline_rejects_invalid_url(db_session, config, metadata):
    with pytest.raises(InvalidVideoURL, match="Invalid YouTube URL"):
        asyncio.run(process_youtube_video(db_session, config, "https://example.com/watch"))

    metadata.assert_not_called()
    assert db_session.query(Video).count() == 0


def test_pipeline_persistence_failure_keeps_video(db_session, config, metadata):
    """Test that a failed flashcard insert surfaces and leaves the video row."""
    with patch("studytube.main.crud.create_flashcards", side_effect=PersistenceError("Failed to save flashcards")):
        with pytest.raises(PersistenceError):
            asyncio.run(process_youtube_video(
                db_session,
                config,
                "https://youtu.be/dQw4w9WgXcQ",
                generator=ContentGenerator(),
                strategies=[StaticStrategy()],
            ))

    assert db_session.query(Video).count() == 1
    assert db_session.query(Flashcard).count() == 0


def test_run_once(config, offline):
    result = run_once("https://youtu.be/abc12345678", 3, 2, "easy", config=config)

    assert result["success"] is True
    assert result["flashcards"] == 3
    assert len(result["quiz"]["quiz_questions"]) == 2
    assert result["video"]["transcript_source"] == "synthetic"


def test_cli_main(capsys):
    """Test the command line entry point parses options and prints JSON."""
    argv = ["studytube", "https://youtu.be/abc12345678", "--flashcards", "2", "--questions", "1", "--difficulty", "hard"]

    with patch.object(sys, "argv", argv), patch("studytube.main.run_once", return_value={"success": True}) as mock_run:
        main()

    mock_run.assert_called_once_with("https://youtu.be/abc12345678", 2, 1, "hard")
    assert json.loads(capsys.readouterr().out) == {"success": True}
