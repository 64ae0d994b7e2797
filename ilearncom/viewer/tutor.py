"""AI tutor renderer - chat bubble, typing indicator and empty state."""

import html


def get_tutor_css() -> str:
    """Get CSS styles for the tutor page."""
    return """
    <style>
    .tutor-banner {
        background: #f3e5f5;
        border: 1px solid #e1bee7;
        border-radius: 16px;
        padding: 1em 1.5em;
        color: #4a148c;
    }
    .tutor-bubble {
        background: white;
        border: 1px solid #e1bee7;
        border-radius: 4px 16px 16px 16px;
        padding: 1em 1.2em;
        margin: 1em 0;
        white-space: pre-wrap;
        line-height: 1.6;
    }
    .tutor-typing {
        color: #8e24aa;
        font-style: italic;
        margin: 1em 0;
    }
    .tutor-empty {
        color: #bdbdbd;
        text-align: center;
        padding: 3em 0;
    }
    </style>
    """


def render_tutor_banner() -> str:
    return (
        '<div class="tutor-banner">'
        '<h3>Your personal AI tutor</h3>'
        'Stuck on something about computers? Ask away, friend, and I\'ll keep it simple.'
        '</div>'
    )


def render_tutor_reply(response: str, in_flight: bool) -> str:
    """
    Render the reply area.

    Args:
        response: Last reply text (may be empty)
        in_flight: Whether a question is waiting for its reply

    Returns:
        HTML string
    """
    parts = []
    if response:
        parts.append(f'<div class="tutor-bubble">✨ {html.escape(response)}</div>')
    if in_flight:
        parts.append('<div class="tutor-typing">Thinking...</div>')
    if not response and not in_flight:
        parts.append('<div class="tutor-empty">💬<br>No messages yet. Type a question below, friend!</div>')
    return ''.join(parts)
