"""
Tests for database CRUD operations.
"""

import pytest
from unittest.mock import patch
from sqlalchemy.exc import OperationalError

from studytube.core.errors import PersistenceError
from studytube.db import crud
from studytube.db.models import Flashcard, Quiz, QuizQuestion, Video
from studytube.models.schemas import (
    Difficulty,
    FlashcardDraft,
    GenerationSource,
    QuizQuestionDraft,
    TranscriptResult,
    VideoMetadata,
)


@pytest.fixture
def video(db_session):
    """A stored video row."""
    return crud.create_video(
        db_session,
        video_id="dQw4w9WgXcQ",
        youtube_url="https://youtu.be/dQw4w9WgXcQ",
        metadata=VideoMetadata(title="DOM Basics", thumbnail_url="https://i.ytimg.com/x.jpg", source="oembed"),
        transcript=TranscriptResult(text="t" * 200, source="timedtext"),
        summary="A summary.",
    )


def _questions(n):
    return [
        QuizQuestionDraft(
            question=f"Question number {i}?",
            options=[f"A{i}", f"B{i}", f"C{i}", f"D{i}"],
            correct_answer=f"B{i}",
            explanation=f"B{i} is correct.",
        )
        for i in range(n)
    ]


def test_create_video(db_session, video):
    assert len(video.id) == 36
    assert video.title == "DOM Basics"
    assert video.transcript_source == "timedtext"
    assert video.duration == 0
    assert video.created_at is not None
    assert db_session.query(Video).count() == 1


def test_create_flashcards_uses_requested_difficulty(db_session, video):
    cards = [
        FlashcardDraft(question=f"What is concept {i}?", answer="An answer long enough.", difficulty=Difficulty.HARD)
        for i in range(3)
    ]

    rows = crud.create_flashcards(db_session, video.id, cards, Difficulty.EASY, GenerationSource.LLM)

    assert len(rows) == 3
    stored = crud.get_flashcards(db_session, video.id)
    assert [row.difficulty for row in stored] == ["easy"] * 3
    assert {row.generated_by for row in stored} == {"llm"}


def test_create_quiz_numbers_questions_in_order(db_session, video):
    """Test that order_index runs 0..n-1 in generated order."""
    quiz = crud.create_quiz(db_session, video.id, video.title, Difficulty.MEDIUM, _questions(5), GenerationSource.TEMPLATE)

    assert quiz.title == "Quiz: DOM Basics (medium)"
    assert quiz.description == "Quiz based on \"DOM Basics\" with 5 medium-level questions"
    assert quiz.generated_by == "template"
    assert [q.order_index for q in quiz.quiz_questions] == [0, 1, 2, 3, 4]
    assert [q.question for q in quiz.quiz_questions] == [f"Question number {i}?" for i in range(5)]
    assert quiz.quiz_questions[2].options == ["A2", "B2", "C2", "D2"]
    assert db_session.query(QuizQuestion).filter(QuizQuestion.quiz_id == quiz.id).count() == 5


def test_video_bundle(db_session, video):
    """Test that a bundle contains every batch generated for the video."""
    crud.create_quiz(db_session, video.id, video.title, Difficulty.EASY, _questions(2), GenerationSource.TEMPLATE)
    crud.create_quiz(db_session, video.id, video.title, Difficulty.HARD, _questions(3), GenerationSource.LLM)

    bundle = crud.get_video_bundle(db_session, video.id)

    assert bundle["video"].id == video.id
    assert bundle["flashcards"] == []
    assert [len(q.quiz_questions) for q in bundle["quizzes"]] == [2, 3]


def test_video_bundle_missing(db_session):
    assert crud.get_video_bundle(db_session, "does-not-exist") is None


def test_list_videos_limit(db_session, video):
    assert crud.list_videos(db_session, limit=1) == [video]


def test_commit_failure_raises_persistence_error(db_session):
    """Test that database errors are wrapped and the session rolled back."""
    error = OperationalError("INSERT INTO videos", {}, Exception("disk I/O error"))

    with patch.object(db_session, "commit", side_effect=error):
        with patch.object(db_session, "rollback") as mock_rollback:
            with pytest.raises(PersistenceError, match="Failed to save video"):
                crud.create_video(
                    db_session,
                    video_id="dQw4w9WgXcQ",
                    youtube_url="https://youtu.be/dQw4w9WgXcQ",
                    metadata=VideoMetadata(title="Video dQw4w9WgXcQ"),
                    transcript=TranscriptResult(text="text", source="synthetic"),
                    summary="",
                )

    mock_rollback.assert_called_once()


def test_flashcard_failure_keeps_video(db_session, video):
    """Test that a failed flashcard insert does not remove the stored video."""
    error = OperationalError("INSERT INTO flashcards", {}, Exception("locked"))
    cards = [FlashcardDraft(question="What is a node?", answer="A single point in the DOM tree.", difficulty=Difficulty.EASY)]

    with patch.object(db_session, "commit", side_effect=error):
        with pytest.raises(PersistenceError):
            crud.create_flashcards(db_session, video.id, cards, Difficulty.EASY, GenerationSource.TEMPLATE)

    assert db_session.query(Video).count() == 1
    assert db_session.query(Flashcard).count() == 0
    assert db_session.query(Quiz).count() == 0
