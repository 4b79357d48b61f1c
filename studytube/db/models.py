"""
SQLAlchemy models for the StudyTube database.
"""

import datetime
import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Integer, JSON, UniqueConstraint
from sqlalchemy.orm import relationship

from studytube.db.database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


class Video(Base):
    """Model representing one processing run of a YouTube video."""
    __tablename__ = "videos"

    id = Column(String(36), primary_key=True, default=_uuid)
    video_id = Column(String(11), nullable=False, index=True)  # YouTube video ID
    title = Column(String(512), nullable=False)
    description = Column(Text, nullable=True)
    youtube_url = Column(String(1024), nullable=False)
    thumbnail_url = Column(String(1024), nullable=True)
    duration = Column(Integer, nullable=False, default=0)
    transcript = Column(Text, nullable=False)
    summary = Column(Text, nullable=True)
    transcript_source = Column(String(32), nullable=False)  # strategy name or "synthetic"
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    # Relationships
    flashcards = relationship("Flashcard", back_populates="video", cascade="all, delete-orphan")
    quizzes = relationship("Quiz", back_populates="video", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Video(id='{self.id}', video_id='{self.video_id}', title='{self.title}')>"


class Flashcard(Base):
    """Model representing a single flashcard."""
    __tablename__ = "flashcards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    video_id = Column(String(36), ForeignKey("videos.id", ondelete="CASCADE"), nullable=False, index=True)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    difficulty = Column(String(16), nullable=False)  # easy|medium|hard
    generated_by = Column(String(16), nullable=False)  # llm|template
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    # Relationships
    video = relationship("Video", back_populates="flashcards")

    def __repr__(self):
        return f"<Flashcard(id={self.id}, video_id='{self.video_id}')>"


class Quiz(Base):
    """Model representing a quiz generated for a video."""
    __tablename__ = "quizzes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    video_id = Column(String(36), ForeignKey("videos.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(600), nullable=False)
    description = Column(Text, nullable=True)
    difficulty = Column(String(16), nullable=False)
    generated_by = Column(String(16), nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    # Relationships
    video = relationship("Video", back_populates="quizzes")
    quiz_questions = relationship(
        "QuizQuestion",
        back_populates="quiz",
        cascade="all, delete-orphan",
        order_by="QuizQuestion.order_index",
    )

    def __repr__(self):
        return f"<Quiz(id={self.id}, video_id='{self.video_id}')>"


class QuizQuestion(Base):
    """Model representing one multiple-choice question of a quiz."""
    __tablename__ = "quiz_questions"
    __table_args__ = (UniqueConstraint("quiz_id", "order_index", name="uq_quiz_question_order"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    quiz_id = Column(Integer, ForeignKey("quizzes.id", ondelete="CASCADE"), nullable=False, index=True)
    question = Column(Text, nullable=False)
    options = Column(JSON, nullable=False)  # ["A","B","C","D"]
    correct_answer = Column(Text, nullable=False)
    explanation = Column(Text, nullable=True)
    order_index = Column(Integer, nullable=False)

    # Relationships
    quiz = relationship("Quiz", back_populates="quiz_questions")

    def __repr__(self):
        return f"<QuizQuestion(id={self.id}, quiz_id={self.quiz_id}, order_index={self.order_index})>"
