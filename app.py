"""
ILearnCom - Computer Fundamentals for Vocational Students

Streamlit application presenting a four-week computer course with quizzes,
AI-generated step illustrations and a peer-tutor chat.

Usage:
    streamlit run app.py
"""

import logging

import streamlit as st
import streamlit.components.v1 as components

from ilearncom.ai import GeminiClient
from ilearncom.classroom import (
    ClassroomSession,
    CurriculumStore,
    OptionState,
    SITEMAP,
    option_state,
)
from ilearncom.config import configure_logging, load_settings
from ilearncom.schemas import AppView, ChoiceAnswer, QuestionType, TextAnswer
from ilearncom.viewer import (
    get_lesson_css,
    render_week_card,
    render_lesson_header,
    render_section,
    render_section_title,
    render_activity_step,
    render_takeaways,
    render_scroll_to_top,
    get_quiz_css,
    quiz_title,
    render_question_header,
    option_label,
    render_matching_pairs,
    render_feedback,
    get_tutor_css,
    render_tutor_banner,
    render_tutor_reply,
)

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

st.set_page_config(
    page_title="ILearnCom",
    page_icon="🖥️",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Create the classroom session once per browser session."""
    if "classroom" in st.session_state:
        return

    settings = load_settings()
    configure_logging(settings.log_level)

    store = CurriculumStore.from_file(settings.curriculum_path)
    client = GeminiClient(
        api_key=settings.api_key,
        text_model=settings.text_model,
        image_model=settings.image_model,
    )
    if not settings.api_key:
        logger.warning("No Gemini API key configured; AI features will fall back")

    st.session_state.classroom = ClassroomSession(
        store, client, client, image_aspect_ratio=settings.image_aspect_ratio,
    )


def get_session() -> ClassroomSession:
    return st.session_state.classroom


# -----------------------------------------------------------------------------
# Sidebar
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sitemap; compact mode shows icons only."""
    session = get_session()
    expanded = session.state.navigation.sidebar_open

    st.sidebar.title("🖥️ ILearnCom" if expanded else "🖥️")

    for item in SITEMAP:
        label = f"{item.icon} {item.name}" if expanded else item.icon
        active = session.view == item.view
        if st.sidebar.button(
            label,
            key=f"nav_{item.view.value}",
            help=item.description,
            type="primary" if active else "secondary",
            width="stretch",
        ):
            session.navigate(item.view)
            st.rerun()

    st.sidebar.divider()
    if st.sidebar.button("✕ Collapse" if expanded else "☰", width="stretch"):
        session.toggle_sidebar()
        st.rerun()


# -----------------------------------------------------------------------------
# Home and Introduction
# -----------------------------------------------------------------------------

def render_home_view():
    session = get_session()

    st.title("Hey friend! Let's learn computers 🚀")
    st.markdown(
        "We turn tricky tech topics into easy ones. Fun, simple, and just like "
        "studying with your best friend before class."
    )
    if st.button("Read the foreword first →"):
        session.navigate(AppView.INTRODUCTION)
        st.rerun()

    col1, col2, col3 = st.columns(3)
    with col1:
        st.subheader("📚 Lessons")
        st.write(f"{len(session.store)} weeks covering the computer basics you need.")
        if st.button("Browse lessons", width="stretch"):
            session.navigate(AppView.CURRICULUM)
            st.rerun()
    with col2:
        st.subheader("✅ Check yourself")
        st.write("Quizzes with detailed explanations for every answer.")
        if st.button("Take the quiz", width="stretch"):
            session.navigate(AppView.QUIZ)
            st.rerun()
    with col3:
        st.subheader("💬 Ask the AI")
        st.write("Confused about something? Ask the AI tutor any time.")
        if st.button("Open AI tutor", width="stretch"):
            session.navigate(AppView.AI_TUTOR)
            st.rerun()


def render_introduction_view():
    session = get_session()
    st.title("📜 Foreword")
    st.caption('"Computers aren\'t hard. You just need to know how to talk to them."')
    st.markdown(
        """
Hello to every vocational student! In a world that runs on technology,
computer skills are not just another subject. They are a tool that moves you
forward in whatever trade you choose: electrical, automotive, accounting or
marketing.

**ILearnCom** is built to be *simple, honest and practical*. We dropped the
headache-inducing jargon and explain things the way a friend would, so you
understand how hardware, software and online safety really work.

- ✅ Short, easy-to-follow lessons
- ✅ AI-generated illustrations for hands-on steps
- ✅ An AI tutor you can ask anything
- ✅ Quizzes with explanations
        """
    )

    if st.button("Start the first lesson →", key="start_first_lesson", type="primary"):
        session.navigate(AppView.CURRICULUM)
        st.rerun()


# -----------------------------------------------------------------------------
# Curriculum and Lesson
# -----------------------------------------------------------------------------

def render_curriculum_view():
    session = get_session()

    st.title("📚 Lessons")
    st.markdown(get_lesson_css(), unsafe_allow_html=True)

    for week in session.store.weeks:
        st.markdown(render_week_card(week), unsafe_allow_html=True)
        if st.button(f"Start week {week.week} →", key=f"open_week_{week.week}"):
            session.open_lesson(week.week)
            st.rerun()


def render_lesson_view():
    session = get_session()
    week = session.selected_week
    if week is None:
        return

    if st.button("← Back to lessons"):
        session.back_to_curriculum()
        st.rerun()

    st.markdown(get_lesson_css(), unsafe_allow_html=True)
    st.markdown(render_lesson_header(week), unsafe_allow_html=True)

    for section_index, section in enumerate(week.sections):
        if not section.is_activity:
            st.markdown(render_section(section), unsafe_allow_html=True)
            continue

        st.markdown(render_section_title(section), unsafe_allow_html=True)
        for step in section.activity_steps():
            render_activity_step_block(week.week, section_index, step)

    st.markdown(render_takeaways(week), unsafe_allow_html=True)

    if st.button(f"Take the week {week.week} quiz →", type="primary", width="stretch"):
        session.start_quiz()
        st.rerun()


def render_activity_step_block(week_number: int, section_index: int, step):
    """Render one step with its illustration button."""
    session = get_session()
    image_uri = session.step_image(week_number, section_index, step)
    loading = session.step_image_loading(week_number, section_index, step)

    st.markdown(render_activity_step(step, image_uri, loading), unsafe_allow_html=True)

    label = "🖼️ Show illustration again" if image_uri else "🖼️ Generate illustration with AI"
    if st.button(label, key=f"img_{week_number}_{section_index}_{step.step}", disabled=loading):
        with st.spinner("Drawing the picture..."):
            session.ensure_step_image(week_number, section_index, step)
        st.rerun()


# -----------------------------------------------------------------------------
# Quiz
# -----------------------------------------------------------------------------

def render_quiz_view():
    session = get_session()
    quiz_state = session.state.quiz
    week = session.selected_week

    st.title("✅ Quiz Bank")
    st.caption(quiz_title(week.title if week else None, week.week if week else None))
    st.markdown(get_quiz_css(), unsafe_allow_html=True)

    for position, item in enumerate(session.quiz_items(), start=1):
        with st.container(border=True):
            render_quiz_item(position, item)

    if not quiz_state.submitted:
        if st.button("Submit answers", type="primary", width="stretch"):
            session.submit_quiz()
            st.rerun()
    else:
        if st.button("Go to the next lesson →", width="stretch"):
            session.advance_to_next_lesson()
            st.rerun()


def render_quiz_item(position: int, item):
    session = get_session()
    quiz_state = session.state.quiz
    question = item.question
    answer = session.answer_for(item)
    submitted = quiz_state.submitted
    widget_key = f"{item.key}_{quiz_state.attempt}"

    st.markdown(render_question_header(position, question), unsafe_allow_html=True)

    if question.is_choice:
        for index, option in enumerate(question.options):
            state = option_state(question, answer, index, submitted)
            if st.button(
                option_label(option, state),
                key=f"opt_{widget_key}_{index}",
                disabled=submitted,
                type="primary" if state in (OptionState.SELECTED, OptionState.CORRECT) else "secondary",
                width="stretch",
            ):
                session.record_answer(item, ChoiceAnswer(index=index))
                st.rerun()

    elif question.type == QuestionType.SHORT_ANSWER:
        current = answer.text if isinstance(answer, TextAnswer) else ""
        text = st.text_input(
            "Your answer",
            value=current,
            key=f"text_{widget_key}",
            disabled=submitted,
            placeholder="Type your answer here...",
        )
        if not submitted and text != current:
            session.record_answer(item, TextAnswer(text=text))

    elif question.type == QuestionType.MATCHING:
        st.markdown(render_matching_pairs(question.matching_pairs or []), unsafe_allow_html=True)

    if submitted:
        st.markdown(render_feedback(item, session.grade(item)), unsafe_allow_html=True)


# -----------------------------------------------------------------------------
# AI Tutor
# -----------------------------------------------------------------------------

def render_tutor_view():
    session = get_session()
    chat = session.state.chat

    st.markdown(get_tutor_css(), unsafe_allow_html=True)
    st.markdown(render_tutor_banner(), unsafe_allow_html=True)
    st.markdown(render_tutor_reply(chat.response, chat.in_flight), unsafe_allow_html=True)

    with st.form("tutor_form"):
        text = st.text_input(
            "Your question",
            value=chat.input_text,
            key=f"chat_input_{chat.generation}",
            placeholder="What do you want to know about computers? Type it here...",
        )
        asked = st.form_submit_button("Ask", disabled=chat.in_flight)

    if asked:
        session.set_chat_input(text)
        with st.spinner("Thinking..."):
            session.ask_tutor()
        st.rerun()

    if chat.response and st.button("Clear conversation"):
        session.reset_chat()
        st.rerun()


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

VIEW_RENDERERS = {
    AppView.HOME: render_home_view,
    AppView.INTRODUCTION: render_introduction_view,
    AppView.CURRICULUM: render_curriculum_view,
    AppView.LESSON: render_lesson_view,
    AppView.QUIZ: render_quiz_view,
    AppView.AI_TUTOR: render_tutor_view,
}


def scroll_to_top():
    components.html(render_scroll_to_top(), height=0)


def main():
    """Main application entry point."""
    init_session_state()
    session = get_session()
    render_sidebar()

    if session.consume_scroll_request():
        scroll_to_top()

    VIEW_RENDERERS[session.view]()


if __name__ == "__main__":
    main()
