"""Question rendering utilities for displaying quiz questions."""

from __future__ import annotations

from quiz_player.core.markdown_math_renderer import renderer
from quiz_player.core.models import Question


def render_question(question: Question, font_size: int = 14, text_color: str = "#1e1e1e") -> str:
    """Render the question prompt as a standalone HTML document.

    Answers are shown as buttons by the question panel, so only the prompt
    goes through markdown. Correctness is never part of the output.

    Returns:
        HTML string ready for display in QWebEngineView
    """
    markdown = question.text.strip() or "(No question text)"
    return renderer.render_full_document(markdown, font_size=font_size, text_color=text_color)
