"""
ClassroomSession - Top-level controller for one viewer session.

Owns the AppState and exposes every user action as a named transition.
The page reads state through the query helpers and never writes to it
directly.
"""

import logging
from typing import Optional

from ilearncom.ai import IllustrationCache, TutorChat
from ilearncom.ai.illustrations import ImageGenerator
from ilearncom.ai.tutor import TextGenerator
from ilearncom.config import IMAGE_ASPECT_RATIO
from ilearncom.schemas import (
    ActivityStep,
    Answer,
    AppState,
    AppView,
    CurriculumWeek,
    step_key,
)

from . import quiz
from .loader import CurriculumStore, QuizItem
from .navigator import Navigator

logger = logging.getLogger(__name__)


class ClassroomSession:
    """
    Combines the CurriculumStore (content), the Navigator (view rules) and
    the two AI flows over a single AppState.
    """

    def __init__(
        self,
        store: CurriculumStore,
        text_generator: TextGenerator,
        image_generator: ImageGenerator,
        state: Optional[AppState] = None,
        image_aspect_ratio: str = IMAGE_ASPECT_RATIO,
    ):
        self.store = store
        self.state = state or AppState()
        self.navigator = Navigator(store)
        self.tutor = TutorChat(self.state.chat, text_generator)
        self.illustrations = IllustrationCache(self.state.images, image_generator, image_aspect_ratio)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def view(self) -> AppView:
        return self.state.navigation.view

    @property
    def selected_week(self) -> Optional[CurriculumWeek]:
        number = self.state.navigation.week_number
        return self.store.find_week(number) if number is not None else None

    def quiz_items(self) -> list[QuizItem]:
        return self.store.quiz_items(self.state.navigation.week_number)

    def answer_for(self, item: QuizItem) -> Optional[Answer]:
        return self.state.quiz.answers.get(item.key)

    def grade(self, item: QuizItem) -> quiz.Verdict:
        return quiz.grade(item.question, self.answer_for(item))

    def consume_scroll_request(self) -> bool:
        """True once after a transition asked for the page to scroll up."""
        requested = self.state.navigation.scroll_to_top
        self.state.navigation.scroll_to_top = False
        return requested

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def navigate(self, view: AppView):
        self.navigator.navigate(self.state, view)

    def open_lesson(self, week_number: int):
        self.navigator.open_lesson(self.state, week_number)

    def back_to_curriculum(self):
        self.navigator.back_to_curriculum(self.state)

    def start_quiz(self):
        self.navigator.start_quiz(self.state)

    def advance_to_next_lesson(self):
        self.navigator.advance_to_next_lesson(self.state)

    def toggle_sidebar(self):
        self.navigator.toggle_sidebar(self.state)

    # -------------------------------------------------------------------------
    # Quiz
    # -------------------------------------------------------------------------

    def record_answer(self, item: QuizItem, answer: Answer) -> bool:
        return quiz.record_answer(self.state.quiz, item.key, item.question, answer)

    def submit_quiz(self):
        quiz.submit(self.state.quiz)

    # -------------------------------------------------------------------------
    # AI tutor
    # -------------------------------------------------------------------------

    def set_chat_input(self, text: str):
        self.tutor.set_input(text)

    def ask_tutor(self, text: Optional[str] = None) -> bool:
        return self.tutor.ask(text)

    def reset_chat(self):
        self.tutor.reset()

    # -------------------------------------------------------------------------
    # Step illustrations
    # -------------------------------------------------------------------------

    def ensure_step_image(self, week_number: int, section_index: int, step: ActivityStep) -> bool:
        key = step_key(week_number, section_index, step.step)
        return self.illustrations.ensure_step_image(key, step)

    def step_image(self, week_number: int, section_index: int, step: ActivityStep) -> Optional[str]:
        return self.illustrations.image_for(step_key(week_number, section_index, step.step))

    def step_image_loading(self, week_number: int, section_index: int, step: ActivityStep) -> bool:
        return self.illustrations.is_loading(step_key(week_number, section_index, step.step))
