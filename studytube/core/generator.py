"""
Summary, flashcard and quiz generation.

Each operation asks the chat model first and falls back to the deterministic
templates in `studytube.core.templates` when no model is configured, the call
fails, or nothing in the reply survives validation.
"""

from typing import Any, Dict, List, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate

from studytube.config import Config
from studytube.core import prompts
from studytube.core.errors import LLMOutputError
from studytube.core.llm import build_chat_model
from studytube.core.output_parser import extract_records
from studytube.core.templates import template_flashcards, template_quiz
from studytube.models.schemas import (
    Difficulty,
    FlashcardDraft,
    GeneratedFlashcards,
    GeneratedQuiz,
    GenerationSource,
    QuizQuestionDraft,
)
from studytube.utils.helpers import collapse_whitespace
from studytube.utils.logger import logging

SUMMARY_TRANSCRIPT_CHARS = 10000
FLASHCARD_TRANSCRIPT_CHARS = 3000
QUIZ_TRANSCRIPT_CHARS = 4000

MIN_QUESTION_LENGTH = 10
MIN_ANSWER_LENGTH = 20


def validate_flashcards(records: List[Dict[str, Any]], difficulty: Difficulty) -> List[FlashcardDraft]:
    """Keep records with a real question and a real answer."""
    cards = []
    for record in records:
        question, answer = record.get("question"), record.get("answer")
        if not isinstance(question, str) or not isinstance(answer, str):
            continue
        if len(question) <= MIN_QUESTION_LENGTH or len(answer) <= MIN_ANSWER_LENGTH:
            continue
        cards.append(FlashcardDraft(question=question, answer=answer, difficulty=difficulty))
    return cards


def validate_quiz_questions(records: List[Dict[str, Any]]) -> List[QuizQuestionDraft]:
    """
    Keep records that form a complete multiple-choice question.

    A question needs four distinct non-empty options, a correct answer equal
    to one of them, and an explanation.
    """
    questions = []
    for record in records:
        question = record.get("question")
        options = record.get("options")
        correct_answer = record.get("correct_answer")
        explanation = record.get("explanation")

        if not isinstance(question, str) or len(question) <= MIN_QUESTION_LENGTH:
            continue
        if not isinstance(options, list) or len(options) != 4:
            continue
        if not all(isinstance(option, str) and option for option in options):
            continue
        if len(set(options)) != 4:
            continue
        if not isinstance(correct_answer, str) or correct_answer not in options:
            continue
        if not isinstance(explanation, str) or not explanation:
            continue

        questions.append(QuizQuestionDraft(
            question=question,
            options=options,
            correct_answer=correct_answer,
            explanation=explanation,
        ))
    return questions


class ContentGenerator:
    """Generates study content for a transcript."""

    def __init__(self, llm: Optional[BaseChatModel] = None):
        """
        Args:
            llm: Chat model to use, or None to always use templates
        """
        self.llm = llm

    @classmethod
    def from_config(cls, config: Config) -> "ContentGenerator":
        return cls(build_chat_model(config.llm))

    async def _complete(self, template: str, **variables) -> str:
        prompt = ChatPromptTemplate.from_messages([("human", template)])
        chain = prompt | self.llm
        response = await chain.ainvoke(variables)
        return response.content if isinstance(response.content, str) else str(response.content)

    async def generate_summary(self, transcript: str, title: str) -> str:
        """Summarize the transcript, or return a templated one-liner."""
        if self.llm is None:
            return (
                f"Summary of \"{title}\": This video covers educational content based on the "
                "transcript analysis. Key concepts and learning objectives are discussed "
                "throughout the presentation."
            )

        try:
            logging.info("Generating summary with LLM...")
            summary = await self._complete(
                prompts.summary_template,
                title=title,
                transcript=transcript[:SUMMARY_TRANSCRIPT_CHARS],
            )
            if summary.strip():
                return summary.strip()
            logging.warning("LLM returned an empty summary")
        except Exception as e:
            logging.error(f"LLM summary failed: {e}")

        return (
            f"Summary of \"{title}\": This educational video provides comprehensive coverage of "
            "key concepts and practical applications. The content includes detailed explanations "
            "and examples to help learners understand the material effectively."
        )

    async def generate_flashcards(
        self, transcript: str, title: str, count: int, difficulty: Difficulty
    ) -> GeneratedFlashcards:
        """Generate up to `count` flashcards (exactly `count` from templates)."""
        difficulty = Difficulty(difficulty)

        if self.llm is None:
            logging.info("No LLM configured, using content-aware flashcard templates")
        else:
            try:
                logging.info(f"Generating {count} {difficulty.value} flashcards with LLM...")
                raw = await self._complete(
                    prompts.flashcard_template,
                    title=title,
                    transcript=collapse_whitespace(transcript)[:FLASHCARD_TRANSCRIPT_CHARS],
                    count=count,
                    difficulty=difficulty.value,
                    difficulty_upper=difficulty.value.upper(),
                    guidance=prompts.flashcard_guidance[difficulty.value],
                    examples=prompts.flashcard_examples[difficulty.value],
                )
                cards = validate_flashcards(extract_records(raw), difficulty)
                if cards:
                    logging.info(f"{len(cards)} valid flashcards after filtering")
                    return GeneratedFlashcards(cards=cards[:count], source=GenerationSource.LLM)
                logging.warning("No valid flashcards found in LLM output")
            except LLMOutputError as e:
                logging.warning(f"Flashcard output could not be parsed: {e}")
            except Exception as e:
                logging.error(f"LLM flashcard generation failed: {e}")
            logging.info("Falling back to content-aware flashcard templates")

        return GeneratedFlashcards(
            cards=template_flashcards(transcript, title, count, difficulty),
            source=GenerationSource.TEMPLATE,
        )

    async def generate_quiz(
        self, transcript: str, title: str, question_count: int, difficulty: Difficulty
    ) -> GeneratedQuiz:
        """Generate up to `question_count` questions (exactly that many from templates)."""
        difficulty = Difficulty(difficulty)

        if self.llm is None:
            logging.info("No LLM configured, using content-aware quiz templates")
        else:
            try:
                logging.info(f"Generating {question_count} {difficulty.value} quiz questions with LLM...")
                raw = await self._complete(
                    prompts.quiz_template,
                    title=title,
                    transcript=collapse_whitespace(transcript)[:QUIZ_TRANSCRIPT_CHARS],
                    count=question_count,
                    difficulty=difficulty.value,
                    difficulty_upper=difficulty.value.upper(),
                    guidance=prompts.quiz_guidance[difficulty.value],
                    examples=prompts.quiz_examples[difficulty.value],
                )
                questions = validate_quiz_questions(extract_records(raw))
                if questions:
                    logging.info(f"{len(questions)} valid quiz questions after filtering")
                    return GeneratedQuiz(questions=questions[:question_count], source=GenerationSource.LLM)
                logging.warning("No valid quiz questions found in LLM output")
            except LLMOutputError as e:
                logging.warning(f"Quiz output could not be parsed: {e}")
            except Exception as e:
                logging.error(f"LLM quiz generation failed: {e}")
            logging.info("Falling back to content-aware quiz templates")

        return GeneratedQuiz(
            questions=template_quiz(transcript, title, question_count, difficulty),
            source=GenerationSource.TEMPLATE,
        )
