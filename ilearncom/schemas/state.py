"""
Application state schemas for ILearnCom.

The whole view state is one serializable object (AppState) owned by the
ClassroomSession controller and changed only through its named transitions.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class AppView(str, Enum):
    HOME = "home"
    INTRODUCTION = "introduction"
    CURRICULUM = "curriculum"
    LESSON = "lesson"
    QUIZ = "quiz"
    AI_TUTOR = "ai-tutor"


# -----------------------------------------------------------------------------
# Navigation
# -----------------------------------------------------------------------------

class NavigationState(BaseModel):
    view: AppView = AppView.HOME
    week_number: Optional[int] = None   # required for LESSON; None in QUIZ = pooled
    sidebar_open: bool = True
    scroll_to_top: bool = False         # one-shot request consumed by the page


# -----------------------------------------------------------------------------
# Quiz answers
# -----------------------------------------------------------------------------

class ChoiceAnswer(BaseModel):
    """Selected option for multiple-choice and scenario questions."""
    kind: Literal["choice"] = "choice"
    index: int = Field(..., ge=0)


class TextAnswer(BaseModel):
    """Free text for short-answer questions."""
    kind: Literal["text"] = "text"
    text: str


Answer = Annotated[Union[ChoiceAnswer, TextAnswer], Field(discriminator="kind")]


def answer_key(week_number: int, question_id: int) -> str:
    """Answer map key; question ids are only unique within a week."""
    return f"w{week_number}-q{question_id}"


class QuizState(BaseModel):
    answers: dict[str, Answer] = {}
    submitted: bool = False
    attempt: int = 0        # bumped on reset; widget keys include it


# -----------------------------------------------------------------------------
# AI tutor chat
# -----------------------------------------------------------------------------

class ChatState(BaseModel):
    input_text: str = ""
    in_flight: bool = False
    response: str = ""
    generation: int = 0     # bumped per request and on reset


# -----------------------------------------------------------------------------
# Step illustrations
# -----------------------------------------------------------------------------

class ImageStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"


class ImageEntry(BaseModel):
    status: ImageStatus
    token: int
    data_uri: Optional[str] = None


def step_key(week_number: int, section_index: int, step_number: int) -> str:
    """Illustration cache key for one activity step."""
    return f"w{week_number}-s{section_index}-p{step_number}"


class ImageCacheState(BaseModel):
    entries: dict[str, ImageEntry] = {}     # absent key = no image
    generation: int = 0


# -----------------------------------------------------------------------------
# Whole application
# -----------------------------------------------------------------------------

class AppState(BaseModel):
    navigation: NavigationState = Field(default_factory=NavigationState)
    quiz: QuizState = Field(default_factory=QuizState)
    chat: ChatState = Field(default_factory=ChatState)
    images: ImageCacheState = Field(default_factory=ImageCacheState)
