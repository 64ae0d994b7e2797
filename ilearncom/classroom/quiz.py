"""
Quiz rules - answer capture, submission and per-question grading.

Grading is recomputed whenever the page renders; no score is stored.
"""

from enum import Enum
from typing import Optional

from ilearncom.schemas import (
    Answer,
    ChoiceAnswer,
    QuestionType,
    QuizQuestion,
    QuizState,
    TextAnswer,
)


class AnswerTypeError(ValueError):
    """The answer variant does not fit the question type."""


class Verdict(str, Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNANSWERED = "unanswered"
    NOT_GRADED = "not_graded"   # matching questions are display-only


class OptionState(str, Enum):
    """Display state of one option button of a choice question."""
    IDLE = "idle"
    SELECTED = "selected"
    CORRECT = "correct"
    WRONG = "wrong"


def normalize_text(text: str) -> str:
    return text.strip().lower()


def check_answer_type(question: QuizQuestion, answer: Answer):
    """
    Raises:
        AnswerTypeError: If the answer cannot belong to the question
    """
    if question.type == QuestionType.MATCHING:
        raise AnswerTypeError(f"Question {question.id} is a matching question and takes no answer")
    if question.is_choice:
        if not isinstance(answer, ChoiceAnswer):
            raise AnswerTypeError(f"Question {question.id} expects an option choice")
        if answer.index >= len(question.options or []):
            raise AnswerTypeError(f"Question {question.id} has no option {answer.index}")
    elif question.type == QuestionType.SHORT_ANSWER and not isinstance(answer, TextAnswer):
        raise AnswerTypeError(f"Question {question.id} expects a text answer")


def record_answer(state: QuizState, key: str, question: QuizQuestion, answer: Answer) -> bool:
    """
    Store an answer, replacing any earlier one for the same key.

    Returns:
        False if the quiz was already submitted (answers are frozen)

    Raises:
        AnswerTypeError: If the answer does not fit the question type
    """
    if state.submitted:
        return False
    check_answer_type(question, answer)
    state.answers[key] = answer
    return True


def submit(state: QuizState):
    """Freeze answers and reveal feedback. Repeat calls change nothing."""
    state.submitted = True


def reset(state: QuizState):
    """Start a fresh, empty attempt."""
    state.answers.clear()
    state.submitted = False
    state.attempt += 1


def grade(question: QuizQuestion, answer: Optional[Answer]) -> Verdict:
    """
    Judge one answer.

    - multiple-choice / scenario: selected index equals the correct index
    - short-answer: equal after trimming and lower-casing both sides
    - matching: never graded
    """
    if question.type == QuestionType.MATCHING:
        return Verdict.NOT_GRADED
    if answer is None:
        return Verdict.UNANSWERED

    if question.is_choice:
        ok = isinstance(answer, ChoiceAnswer) and answer.index == question.correct_answer
    else:
        ok = (
            isinstance(answer, TextAnswer)
            and normalize_text(answer.text) == normalize_text(str(question.correct_answer))
        )
    return Verdict.CORRECT if ok else Verdict.INCORRECT


def option_state(
    question: QuizQuestion,
    answer: Optional[Answer],
    index: int,
    submitted: bool,
) -> OptionState:
    """
    Colour state for option ``index``.

    Before submission only the selection shows; afterwards the correct
    option is always marked and a wrong selection is flagged.
    """
    selected = isinstance(answer, ChoiceAnswer) and answer.index == index
    if submitted:
        if index == question.correct_answer:
            return OptionState.CORRECT
        if selected:
            return OptionState.WRONG
    return OptionState.SELECTED if selected else OptionState.IDLE
