"""
Lesson renderer - HTML for the lesson list and lesson pages.

Features:
- Week cards for the curriculum list
- Lesson header, plain sections and takeaways
- Activity steps with an optional generated illustration
"""

from typing import Optional
import html

from ilearncom.schemas import ActivityStep, CurriculumWeek, LessonSection


def get_lesson_css() -> str:
    """Get CSS styles for lesson display."""
    return """
    <style>
    .week-card {
        background: white;
        border: 1px solid #eee;
        border-radius: 16px;
        padding: 1.2em 1.5em;
        margin-bottom: 0.5em;
    }
    .week-badge {
        display: inline-block;
        background: #e3f2fd;
        color: #1565C0;
        border-radius: 999px;
        padding: 0.15em 0.9em;
        font-size: 0.85em;
        font-weight: 600;
    }
    .week-subtopics {
        color: #666;
        font-size: 0.9em;
    }
    .week-assessment {
        color: #388E3C;
        font-size: 0.85em;
        margin-top: 0.5em;
    }
    .lesson-section {
        border-left: 4px solid #1976D2;
        padding-left: 1em;
        margin: 1.5em 0;
    }
    .lesson-section h3 {
        margin-bottom: 0.6em;
    }
    .activity-step {
        background: #fafafa;
        border: 1px solid #eee;
        border-radius: 12px;
        padding: 1em;
        margin: 0.8em 0;
    }
    .step-number {
        display: inline-block;
        width: 1.8em;
        height: 1.8em;
        line-height: 1.8em;
        text-align: center;
        border-radius: 50%;
        background: #1976D2;
        color: white;
        font-weight: 700;
        margin-right: 0.5em;
    }
    .step-image {
        width: 100%;
        aspect-ratio: 16 / 9;
        object-fit: cover;
        border-radius: 12px;
        margin-top: 0.8em;
    }
    .step-image-placeholder {
        width: 100%;
        aspect-ratio: 16 / 9;
        border-radius: 12px;
        margin-top: 0.8em;
        background: #eceff1;
        color: #90a4ae;
        display: flex;
        align-items: center;
        justify-content: center;
    }
    .takeaways {
        background: #1a237e;
        color: white;
        border-radius: 16px;
        padding: 1.2em 1.5em;
    }
    </style>
    """


def _paragraphs(text: str) -> str:
    """Escape text and keep its line breaks."""
    return html.escape(text).replace("\n", "<br>")


def render_week_card(week: CurriculumWeek) -> str:
    """Render one week of the curriculum list."""
    parts = ['<div class="week-card">']
    parts.append(f'<span class="week-badge">Week {week.week}</span>')
    parts.append(f'<h3>{html.escape(week.title)}</h3>')
    parts.append(f'<p>{html.escape(week.short_desc)}</p>')
    if week.subtopics:
        topics = " · ".join(html.escape(t) for t in week.subtopics)
        parts.append(f'<div class="week-subtopics">{topics}</div>')
    if week.assessment:
        parts.append(f'<div class="week-assessment">Assessment: {html.escape(week.assessment)}</div>')
    parts.append('</div>')
    return ''.join(parts)


def render_lesson_header(week: CurriculumWeek) -> str:
    return (
        f'<span class="week-badge">Week {week.week}</span>'
        f'<h2>{html.escape(week.title)}</h2>'
        f'<p>{_paragraphs(week.introduction)}</p>'
    )


def render_section(section: LessonSection) -> str:
    """Render a plain (non-activity) section."""
    return (
        '<div class="lesson-section">'
        f'<h3>{html.escape(section.title)}</h3>'
        f'<div>{_paragraphs(section.content)}</div>'
        '</div>'
    )


def render_section_title(section: LessonSection) -> str:
    return f'<div class="lesson-section"><h3>{html.escape(section.title)}</h3></div>'


def render_activity_step(
    step: ActivityStep,
    image_uri: Optional[str] = None,
    loading: bool = False,
) -> str:
    """
    Render one activity step.

    Args:
        step: The step
        image_uri: Data URI of a generated illustration, if any
        loading: Whether an illustration is being generated

    Returns:
        HTML string for the step
    """
    parts = ['<div class="activity-step">']
    parts.append(f'<span class="step-number">{step.step}</span>')
    parts.append(f'<strong>{html.escape(step.title)}</strong>')
    parts.append(f'<p>{_paragraphs(step.desc)}</p>')
    if loading:
        parts.append('<div class="step-image-placeholder">Drawing the picture...</div>')
    elif image_uri:
        parts.append(
            f'<img class="step-image" src="{html.escape(image_uri, quote=True)}" '
            f'alt="{html.escape(step.title, quote=True)}">'
        )
    parts.append('</div>')
    return ''.join(parts)


def render_takeaways(week: CurriculumWeek) -> str:
    if not week.takeaways:
        return ""
    items = ''.join(f'<li>{html.escape(t)}</li>' for t in week.takeaways)
    return f'<div class="takeaways"><h3>Key takeaways</h3><ul>{items}</ul></div>'


# Current Streamlit renders the scroll container as data-testid="stMain";
# older releases used <section class="main">.
MAIN_CONTAINER_SELECTOR = '[data-testid="stMain"], section.main'


def render_scroll_to_top() -> str:
    """Script for a zero-height component that scrolls the page to the top."""
    return (
        "<script>"
        f"const main = window.parent.document.querySelector('{MAIN_CONTAINER_SELECTOR}');"
        "if (main) { main.scrollTo(0, 0); }"
        "window.parent.scrollTo(0, 0);"
        "</script>"
    )
