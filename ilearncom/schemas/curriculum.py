"""
Curriculum schemas for ILearnCom.

Defines Pydantic models for the static curriculum:
- Weeks with sections, takeaways and a per-week quiz
- Activity steps (serialized inside activity sections)
- Quiz questions of four types
"""

import json
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator


class SectionType(str, Enum):
    TEXT = "text"
    TABLE = "table"
    LIST = "list"
    ACTIVITY = "activity"
    ASSESSMENT = "assessment"


class QuestionType(str, Enum):
    MULTIPLE_CHOICE = "multiple-choice"
    MATCHING = "matching"
    SHORT_ANSWER = "short-answer"
    SCENARIO = "scenario"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


CHOICE_TYPES = {QuestionType.MULTIPLE_CHOICE, QuestionType.SCENARIO}


# -----------------------------------------------------------------------------
# Lesson sections
# -----------------------------------------------------------------------------

class ActivityStep(BaseModel):
    """One illustrated step of an activity section."""
    step: int = Field(..., ge=1)
    title: str = Field(..., min_length=1)
    desc: str


def parse_activity_steps(content: str) -> list[ActivityStep]:
    """
    Deserialize an activity section payload.

    Raises:
        ValueError: If the payload is not a list of steps, step titles
            are empty or repeated, or step numbers are repeated.
    """
    try:
        raw = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValueError(f"Activity content is not valid JSON: {e}") from e
    if not isinstance(raw, list):
        raise ValueError("Activity content must be a list of steps")

    steps = [ActivityStep.model_validate(item) for item in raw]
    titles = [s.title.strip() for s in steps]
    if any(not t for t in titles):
        raise ValueError("Activity step titles must not be blank")
    if len(set(titles)) != len(titles):
        raise ValueError(f"Activity step titles must be unique: {titles}")
    numbers = [s.step for s in steps]
    if len(set(numbers)) != len(numbers):
        raise ValueError(f"Activity step numbers must be unique: {numbers}")
    return steps


class LessonSection(BaseModel):
    title: str
    content: str            # plain text, or a JSON list of steps for activities
    type: SectionType = SectionType.TEXT

    @model_validator(mode="after")
    def _check_activity(self):
        if self.type == SectionType.ACTIVITY:
            parse_activity_steps(self.content)
        return self

    @property
    def is_activity(self) -> bool:
        return self.type == SectionType.ACTIVITY

    def activity_steps(self) -> list[ActivityStep]:
        """Steps of an activity section; empty for plain sections."""
        if not self.is_activity:
            return []
        return parse_activity_steps(self.content)


# -----------------------------------------------------------------------------
# Quiz questions
# -----------------------------------------------------------------------------

class MatchingPair(BaseModel):
    left: str
    right: str


class QuizQuestion(BaseModel):
    """
    A quiz question. Only the payload fields relevant to ``type`` are
    consulted:

    - multiple-choice / scenario: ``options`` + integer ``correct_answer``
    - short-answer: string ``correct_answer``
    - matching: ``matching_pairs``
    """
    id: int
    type: QuestionType
    difficulty: Difficulty
    question: str
    explanation: str
    options: Optional[list[str]] = None
    correct_answer: Union[int, str, None] = None
    matching_pairs: Optional[list[MatchingPair]] = None

    @model_validator(mode="after")
    def _check_payload(self):
        if self.type in CHOICE_TYPES:
            if not self.options:
                raise ValueError(f"Question {self.id}: {self.type.value} needs options")
            if not isinstance(self.correct_answer, int) or isinstance(self.correct_answer, bool):
                raise ValueError(f"Question {self.id}: correct_answer must be an option index")
            if not 0 <= self.correct_answer < len(self.options):
                raise ValueError(f"Question {self.id}: correct_answer out of range")
        elif self.type == QuestionType.SHORT_ANSWER:
            if not isinstance(self.correct_answer, str) or not self.correct_answer.strip():
                raise ValueError(f"Question {self.id}: short-answer needs a text correct_answer")
        elif self.type == QuestionType.MATCHING:
            if not self.matching_pairs:
                raise ValueError(f"Question {self.id}: matching needs matching_pairs")
        return self

    @property
    def is_choice(self) -> bool:
        return self.type in CHOICE_TYPES


# -----------------------------------------------------------------------------
# Curriculum
# -----------------------------------------------------------------------------

class CurriculumWeek(BaseModel):
    week: int = Field(..., ge=1)
    title: str
    short_desc: str
    subtopics: list[str] = []
    assessment: str = ""    # how the week is evaluated
    introduction: str
    sections: list[LessonSection] = []
    takeaways: list[str] = []
    quiz: list[QuizQuestion] = []

    @model_validator(mode="after")
    def _check_question_ids(self):
        ids = [q.id for q in self.quiz]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Week {self.week}: duplicate quiz question ids {ids}")
        return self


class Curriculum(BaseModel):
    weeks: list[CurriculumWeek]

    @model_validator(mode="after")
    def _check_numbering(self):
        numbers = [w.week for w in self.weeks]
        if numbers != list(range(1, len(numbers) + 1)):
            raise ValueError(f"Week numbers must be contiguous from 1: {numbers}")
        return self
