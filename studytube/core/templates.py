"""
Deterministic flashcard and quiz generation used when the LLM is unavailable
or its output is unusable.

Questions are filled from fixed templates, keyed on topic words in the title
and on technical terms found in the transcript.
"""

import re
from typing import Dict, List

from studytube.models.schemas import Difficulty, FlashcardDraft, QuizQuestionDraft
from studytube.utils.logger import logging

PROGRAMMING_TERMS = [
    "function", "variable", "method", "object", "array", "property",
    "event", "callback", "parameter", "return", "loop", "condition",
]
DOM_TERMS = [
    "element", "selector", "attribute", "innerHTML", "textContent",
    "addEventListener", "querySelector", "getElementById",
]
JS_TERMS = [
    "const", "let", "var", "arrow function", "template literal",
    "destructuring", "spread operator",
]
TECHNICAL_TERMS = PROGRAMMING_TERMS + DOM_TERMS + JS_TERMS

SELECTION_METHODS = ("querySelector", "getElementById")

SKILL_ASSESSED = {
    Difficulty.EASY: "basic recall",
    Difficulty.MEDIUM: "conceptual understanding",
    Difficulty.HARD: "analytical thinking",
}


def find_technical_terms(transcript: str) -> List[str]:
    """Return vocabulary terms that appear anywhere in the transcript."""
    text = (transcript or "").lower()
    return [term for term in TECHNICAL_TERMS if term.lower() in text]


def main_topic(title: str) -> str:
    return title.split("|")[0].strip() or title


def _label(difficulty: Difficulty) -> str:
    return f"[{difficulty.value.upper()}]"


# ---------------------------------------------------------------------------
# Flashcards
# ---------------------------------------------------------------------------

def extract_key_concepts(transcript: str, title: str) -> List[Dict[str, str]]:
    """Build question/answer concepts from title keywords and transcript terms."""
    terms = find_technical_terms(transcript)
    sentences = [s for s in re.split(r"[.!?]+", transcript or "") if len(s.strip()) > 20]
    lower_title = title.lower()
    topic = main_topic(title)
    concepts = []

    logging.info(f"Found technical terms: {', '.join(terms) or 'none'}")

    if "dom" in lower_title:
        if "element" in terms:
            methods = [t for t in terms if t in SELECTION_METHODS]
            concepts.append({
                "question": "What methods for DOM element selection are discussed in this video?",
                "answer": (
                    "Based on the video content, DOM element selection is performed using JavaScript "
                    f"methods like {', '.join(methods) or 'standard DOM selection methods'}. The video "
                    "demonstrates practical approaches to accessing HTML elements for manipulation."
                ),
            })
        if "event" in terms:
            concepts.append({
                "question": "How does the video explain DOM event handling?",
                "answer": (
                    "The video covers event handling in the DOM, showing how to respond to user "
                    "interactions and browser events. This includes practical examples of attaching "
                    "event listeners and managing event-driven functionality."
                ),
            })
        techniques = "".join([
            "innerHTML modification, " if "innerHTML" in terms else "",
            "textContent updates, " if "textContent" in terms else "",
        ])
        concepts.append({
            "question": "What DOM manipulation techniques are demonstrated in this video?",
            "answer": (
                f"The video demonstrates practical DOM manipulation including {techniques}"
                "and dynamic element interaction techniques."
            ),
        })

    if "javascript" in lower_title:
        js_features = [t for t in terms if t in JS_TERMS]
        fundamentals = [t for t in terms if t in PROGRAMMING_TERMS][:3]
        features = f"modern JavaScript features including {', '.join(js_features)}, along with " if js_features else ""
        concepts.append({
            "question": "What JavaScript programming concepts are covered in this educational content?",
            "answer": (
                f"This video covers {features}fundamental programming concepts such as "
                f"{', '.join(fundamentals) or 'core programming building blocks'}. The content focuses "
                "on practical implementation and real-world applications."
            ),
        })
        concepts.append({
            "question": "How are JavaScript functions and methods explained in the video?",
            "answer": (
                "The video provides detailed explanations of JavaScript "
                f"{'functions, their creation and usage, ' if 'function' in terms else ''}"
                f"{'methods and their application, ' if 'method' in terms else ''}"
                "demonstrating practical programming techniques for effective code development."
            ),
        })

    concepts.append({
        "question": f"What are the key learning objectives addressed in \"{topic}\"?",
        "answer": (
            f"This educational video addresses comprehensive learning objectives related to {topic}. "
            "The content systematically builds understanding through "
            f"{'hands-on technical demonstrations' if len(terms) > 3 else 'structured instruction'}, "
            "providing both conceptual knowledge and practical application skills."
        ),
    })
    if terms:
        implementation = ", ".join(terms[:4]) + (" and other key concepts" if len(terms) > 4 else "")
    else:
        implementation = f"the core techniques of {topic}"
    concepts.append({
        "question": "What practical implementation techniques are demonstrated in this video?",
        "answer": (
            f"The video demonstrates practical implementation using {implementation}. The "
            "instructional approach emphasizes real-world applications and hands-on examples."
        ),
    })
    concepts.append({
        "question": "How does this content support progressive skill development?",
        "answer": (
            "The video content is structured to support learners at different levels, from "
            "foundational concepts to advanced applications. It includes "
            f"{'comprehensive explanations' if len(sentences) > 20 else 'focused instruction'} "
            f"that build systematically on core principles in {topic}."
        ),
    })

    return concepts


def adjust_for_difficulty(concept: Dict[str, str], difficulty: Difficulty) -> Dict[str, str]:
    """Reframe a concept's question and answer for a difficulty tier."""
    question, answer = concept["question"], concept["answer"]

    if difficulty == Difficulty.EASY:
        question = re.sub(r"How does|What techniques|How are", "What is", question, count=1)
        question = re.sub(r"are discussed|are covered|are demonstrated", "mentioned in this video", question, count=1)
        answer = answer.split(".")[0] + ". This basic concept is fundamental to understanding the topic."
    elif difficulty == Difficulty.MEDIUM:
        if "How" not in question:
            question = question.replace("What", "How does the video explain", 1)
        answer += " Understanding this concept requires applying the knowledge in practical scenarios."
    else:
        question = question.replace("What", "Analyze how", 1).replace("How does", "Critically evaluate how", 1)
        answer += (
            " This advanced concept requires synthesizing multiple related ideas and evaluating "
            "their interactions in complex scenarios."
        )

    return {"question": question, "answer": answer}


def template_flashcards(transcript: str, title: str, count: int, difficulty: Difficulty) -> List[FlashcardDraft]:
    """
    Generate exactly `count` flashcards from templates.

    Concepts are cycled when `count` exceeds the number available; repeats
    carry a "(Question N)" suffix.
    """
    difficulty = Difficulty(difficulty)
    concepts = [adjust_for_difficulty(c, difficulty) for c in extract_key_concepts(transcript, title)]

    cards = []
    for index in range(count):
        concept = concepts[index % len(concepts)]
        question = f"{_label(difficulty)} {concept['question']}"
        if index >= len(concepts):
            question += f" (Question {index + 1})"
        cards.append(FlashcardDraft(question=question, answer=concept["answer"], difficulty=difficulty))

    logging.info(f"Generated {len(cards)} {difficulty.value} template flashcards")
    return cards


# ---------------------------------------------------------------------------
# Quiz
# ---------------------------------------------------------------------------

def _dom_questions(topic: str, terms: List[str], difficulty: Difficulty) -> List[QuizQuestionDraft]:
    if difficulty == Difficulty.EASY:
        return [
            QuizQuestionDraft(
                question=f"According to \"{topic}\", what does DOM stand for?",
                options=["Document Object Model", "Data Object Management", "Direct Object Method", "Dynamic Object Module"],
                correct_answer="Document Object Model",
                explanation="The video explains that DOM stands for Document Object Model, which is fundamental to understanding web page structure and manipulation.",
            ),
            QuizQuestionDraft(
                question="Based on the video content, what is the primary purpose of the DOM?",
                options=["Managing databases", "Representing web page structure", "Processing images", "Handling network requests"],
                correct_answer="Representing web page structure",
                explanation="The video demonstrates that the DOM represents the structure of web pages, allowing programs to interact with HTML elements.",
            ),
        ]
    if difficulty == Difficulty.MEDIUM:
        methods = "querySelector and getElementById" if "querySelector" in terms else "standard DOM selection techniques"
        return [
            QuizQuestionDraft(
                question="How does the video explain the process of DOM element selection?",
                options=["Only through CSS", "Using JavaScript selection methods", "Directly editing HTML", "Through browser tools only"],
                correct_answer="Using JavaScript selection methods",
                explanation=f"The video demonstrates practical JavaScript methods like {methods} for accessing elements.",
            ),
            QuizQuestionDraft(
                question="What relationship between JavaScript and DOM manipulation is shown in the video?",
                options=["They are unrelated", "JavaScript can read and modify DOM elements", "Only CSS can modify DOM", "DOM cannot be changed"],
                correct_answer="JavaScript can read and modify DOM elements",
                explanation="The video shows how JavaScript provides powerful capabilities for both reading from and writing to DOM elements dynamically.",
            ),
        ]
    return [
        QuizQuestionDraft(
            question="Analyze the DOM manipulation strategies discussed in the video - why would you choose event-driven approaches over direct manipulation?",
            options=["Events are faster", "Events provide better user interaction and dynamic response", "Events use less memory", "Events are easier to code"],
            correct_answer="Events provide better user interaction and dynamic response",
            explanation="The video demonstrates that event-driven DOM manipulation creates more interactive and responsive applications by reacting to user actions and system events.",
        ),
        QuizQuestionDraft(
            question="Evaluate the DOM concepts presented: How do selection methods, modification techniques, and event handling work together in real applications?",
            options=["They work independently", "They create a comprehensive system for dynamic web interaction", "Only selection is important", "They replace HTML entirely"],
            correct_answer="They create a comprehensive system for dynamic web interaction",
            explanation="The video shows how combining DOM selection, modification, and event handling creates powerful, interactive web applications with dynamic user experiences.",
        ),
    ]


def _javascript_questions(terms: List[str], difficulty: Difficulty) -> List[QuizQuestionDraft]:
    if difficulty == Difficulty.EASY:
        subject = "functions" if "function" in terms else "methods"
        return [QuizQuestionDraft(
            question=f"According to the video, what are JavaScript {subject} used for?",
            options=["Only calculations", "Executing code and performing tasks", "Storing data only", "Styling web pages"],
            correct_answer="Executing code and performing tasks",
            explanation=f"The video explains that JavaScript {subject} are fundamental building blocks for executing code and performing various programming tasks.",
        )]
    if difficulty == Difficulty.MEDIUM:
        pair = " and ".join(terms[:2]) or "functions and variables"
        return [QuizQuestionDraft(
            question=f"How does the video demonstrate the relationship between JavaScript {pair}?",
            options=["They are unrelated", "They work together to create functionality", "One replaces the other", "They are identical"],
            correct_answer="They work together to create functionality",
            explanation=f"The video shows how different JavaScript concepts like {pair} complement each other to build comprehensive programming solutions.",
        )]
    trio = ", ".join(terms[:3]) or "functions, objects, and events"
    return [QuizQuestionDraft(
        question=f"Synthesize the JavaScript programming patterns shown in the video: How do {trio} combine to solve complex programming challenges?",
        options=["They create simple scripts only", "They enable sophisticated programming architectures and problem-solving approaches", "They only handle basic operations", "They replace other programming languages"],
        correct_answer="They enable sophisticated programming architectures and problem-solving approaches",
        explanation="The video demonstrates how advanced JavaScript concepts work synergistically to create robust, scalable solutions for complex programming challenges in modern web development.",
    )]


def _general_question(topic: str, difficulty: Difficulty) -> QuizQuestionDraft:
    if difficulty == Difficulty.EASY:
        question = f"According to the video, what kind of content does \"{topic}\" provide?"
        first, correct = "Surface-level information only", "Comprehensive educational content with practical examples"
        approach = "introduces fundamental concepts clearly"
    elif difficulty == Difficulty.MEDIUM:
        question = f"How does the video explain the practical application of concepts in \"{topic}\"?"
        first, correct = "Theoretical concepts only", "Applied knowledge with real-world scenarios"
        approach = "applies knowledge to practical scenarios"
    else:
        question = f"Analyze how the video demonstrates advanced synthesis of concepts in \"{topic}\"."
        first, correct = "Theoretical concepts only", "Advanced integration of multiple complex concepts"
        approach = "synthesizes complex relationships between advanced concepts"

    return QuizQuestionDraft(
        question=question,
        options=[first, correct, "Entertainment content", "Historical information only"],
        correct_answer=correct,
        explanation=f"The video provides {difficulty.value}-level instruction that {approach} to support comprehensive learning.",
    )


def template_quiz(transcript: str, title: str, question_count: int, difficulty: Difficulty) -> List[QuizQuestionDraft]:
    """
    Generate exactly `question_count` multiple-choice questions from templates.

    The question bank depends on title keywords and the difficulty tier and is
    cycled to fill the requested count; repeats are numbered.
    """
    difficulty = Difficulty(difficulty)
    terms = find_technical_terms(transcript)
    topic = main_topic(title)
    lower_title = title.lower()
    label = _label(difficulty)

    bank: List[QuizQuestionDraft] = []
    if "dom" in lower_title:
        bank.extend(_dom_questions(topic, terms, difficulty))
    if "javascript" in lower_title:
        bank.extend(_javascript_questions(terms, difficulty))
    bank.append(_general_question(topic, difficulty))

    questions = []
    for index in range(question_count):
        base = bank[index % len(bank)]
        if index < len(bank):
            question, explanation = f"{label} {base.question}", base.explanation
        else:
            question = f"{label} {base.question} (Question {index + 1})"
            explanation = f"{base.explanation} This {difficulty.value}-level assessment evaluates {SKILL_ASSESSED[difficulty]} skills."
        questions.append(base.model_copy(update={
            "question": question,
            "options": list(base.options),
            "explanation": explanation,
        }))

    logging.info(f"Generated {len(questions)} {difficulty.value} template quiz questions")
    return questions
