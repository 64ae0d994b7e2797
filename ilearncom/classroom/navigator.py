"""
Navigator - View switching and lesson sequencing.

Provides:
- Sidebar sitemap
- Direct view transitions (sidebar, lesson cards, back buttons)
- Advance-to-next-lesson after a quiz
"""

import logging
from dataclasses import dataclass

from ilearncom.schemas import AppState, AppView

from . import quiz
from .loader import CurriculumStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SitemapItem:
    """Sidebar destination."""
    name: str
    view: AppView
    description: str
    icon: str


SITEMAP = [
    SitemapItem("Home", AppView.HOME, "Start page and quick links", "🏠"),
    SitemapItem("Foreword", AppView.INTRODUCTION, "Why and how to use this course", "📜"),
    SitemapItem("Lessons", AppView.CURRICULUM, "All weeks of the course", "📚"),
    SitemapItem("Quiz Bank", AppView.QUIZ, "Every quiz question in one place", "✅"),
    SitemapItem("AI Tutor", AppView.AI_TUTOR, "Ask a question, get a friendly answer", "💬"),
]


class Navigator:
    """
    Navigation transitions over an AppState.

    Only the navigation and quiz parts of the state are touched.
    """

    def __init__(self, store: CurriculumStore):
        self.store = store

    def _enter(self, state: AppState, view: AppView):
        if view == AppView.QUIZ:
            quiz.reset(state.quiz)
        state.navigation.view = view
        logger.debug(f"View -> {view.value} (week={state.navigation.week_number})")

    def navigate(self, state: AppState, view: AppView):
        """
        Sidebar selection.

        Any destination other than the lesson page drops the selected week.
        The lesson page without a selected week shows the lesson list.
        """
        if view != AppView.LESSON:
            state.navigation.week_number = None
        elif state.navigation.week_number is None:
            view = AppView.CURRICULUM
        self._enter(state, view)

    def open_lesson(self, state: AppState, week_number: int):
        """Show one week's lesson page."""
        self.store.get_week(week_number)
        state.navigation.week_number = week_number
        self._enter(state, AppView.LESSON)

    def back_to_curriculum(self, state: AppState):
        self._enter(state, AppView.CURRICULUM)

    def start_quiz(self, state: AppState):
        """Quiz for the selected week, or the pooled quiz if none."""
        self._enter(state, AppView.QUIZ)

    def advance_to_next_lesson(self, state: AppState):
        """
        Leave a submitted quiz for the next lesson.

        - no selected week: lesson list, selection untouched
        - next week exists: its lesson page, quiz reset, scroll to top
        - last week: lesson list, selection cleared, quiz reset, scroll to top
        """
        nav = state.navigation
        if nav.week_number is None:
            self._enter(state, AppView.CURRICULUM)
            return

        next_week = self.store.next_week(nav.week_number)
        quiz.reset(state.quiz)
        if next_week is not None:
            nav.week_number = next_week.week
            self._enter(state, AppView.LESSON)
        else:
            nav.week_number = None
            self._enter(state, AppView.CURRICULUM)
        nav.scroll_to_top = True

    def toggle_sidebar(self, state: AppState):
        state.navigation.sidebar_open = not state.navigation.sidebar_open
