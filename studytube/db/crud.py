"""
CRUD operations for the StudyTube database.

Every create_* call commits on its own; there is no transaction spanning the
video, flashcard and quiz inserts.
"""

from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from studytube.core.errors import PersistenceError
from studytube.db.models import Flashcard, Quiz, QuizQuestion, Video
from studytube.models.schemas import (
    Difficulty,
    FlashcardDraft,
    GenerationSource,
    QuizQuestionDraft,
    TranscriptResult,
    VideoMetadata,
)
from studytube.utils.logger import logging


def _commit(db: Session, message: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logging.error(f"{message}: {e}")
        raise PersistenceError(message) from e


def create_video(
    db: Session,
    video_id: str,
    youtube_url: str,
    metadata: VideoMetadata,
    transcript: TranscriptResult,
    summary: str,
) -> Video:
    """Insert the video row for one processing run."""
    video = Video(
        video_id=video_id,
        title=metadata.title,
        description=metadata.description,
        youtube_url=youtube_url,
        thumbnail_url=metadata.thumbnail_url,
        duration=metadata.duration,
        transcript=transcript.text,
        summary=summary,
        transcript_source=transcript.source,
    )
    db.add(video)
    _commit(db, "Failed to save video")
    db.refresh(video)
    logging.info(f"Video saved: {video.id}")
    return video


def create_flashcards(
    db: Session,
    video_id: str,
    cards: Sequence[FlashcardDraft],
    difficulty: Difficulty,
    generated_by: GenerationSource,
) -> List[Flashcard]:
    """Insert a batch of flashcards, all tagged with the requested difficulty."""
    difficulty = Difficulty(difficulty)
    rows = [
        Flashcard(
            video_id=video_id,
            question=card.question,
            answer=card.answer,
            difficulty=difficulty.value,
            generated_by=GenerationSource(generated_by).value,
        )
        for card in cards
    ]
    db.add_all(rows)
    _commit(db, "Failed to save flashcards")
    logging.info(f"Saved {len(rows)} flashcards for video {video_id}")
    return rows


def create_quiz(
    db: Session,
    video_id: str,
    video_title: str,
    difficulty: Difficulty,
    questions: Sequence[QuizQuestionDraft],
    generated_by: GenerationSource,
) -> Quiz:
    """Insert a quiz and its questions, numbered 0..n-1 in the given order."""
    difficulty = Difficulty(difficulty)
    quiz = Quiz(
        video_id=video_id,
        title=f"Quiz: {video_title} ({difficulty.value})",
        description=f"Quiz based on \"{video_title}\" with {len(questions)} {difficulty.value}-level questions",
        difficulty=difficulty.value,
        generated_by=GenerationSource(generated_by).value,
    )
    quiz.quiz_questions = [
        QuizQuestion(
            question=question.question,
            options=list(question.options),
            correct_answer=question.correct_answer,
            explanation=question.explanation,
            order_index=index,
        )
        for index, question in enumerate(questions)
    ]
    db.add(quiz)
    _commit(db, "Failed to save quiz")
    db.refresh(quiz)
    logging.info(f"Saved quiz {quiz.id} with {len(questions)} questions for video {video_id}")
    return quiz


def get_video(db: Session, video_id: str) -> Optional[Video]:
    """Get a video row by its primary key."""
    return db.query(Video).filter(Video.id == video_id).first()


def list_videos(db: Session, limit: int = 20) -> List[Video]:
    """Most recently processed videos first."""
    return db.query(Video).order_by(Video.created_at.desc()).limit(limit).all()


def get_flashcards(db: Session, video_id: str) -> List[Flashcard]:
    return db.query(Flashcard).filter(Flashcard.video_id == video_id).order_by(Flashcard.id).all()


def get_quizzes(db: Session, video_id: str) -> List[Quiz]:
    return db.query(Quiz).filter(Quiz.video_id == video_id).order_by(Quiz.id).all()


def get_video_bundle(db: Session, video_id: str) -> Optional[Dict[str, Any]]:
    """
    Get a video together with all of its flashcards and quizzes.

    Returns a dictionary with "video", "flashcards" and "quizzes" keys, or
    None if the video does not exist.
    """
    video = get_video(db, video_id)
    if not video:
        logging.error(f"Video with ID {video_id} not found in the database.")
        return None

    return {
        "video": video,
        "flashcards": get_flashcards(db, video_id),
        "quizzes": get_quizzes(db, video_id),
    }
