"""Render a finished play-through as a Markdown or HTML report."""

from __future__ import annotations

import logging
from pathlib import Path

from quiz_player.constants.ui_constants import (
    NOTHING_SELECTED,
    SCORE_TEMPLATE,
    VERDICT_CORRECT,
    VERDICT_WRONG,
)
from quiz_player.core.errors import ReportExportError
from quiz_player.core.markdown_math_renderer import renderer
from quiz_player.core.models import Answer, QuestionEvaluation, QuizResult

logger = logging.getLogger(__name__)

_MARKDOWN_SUFFIXES = (".md", ".markdown")
_HTML_SUFFIXES = (".html", ".htm")
_PDF_SUFFIXES = (".pdf",)
_DEFAULT_TITLE = "Quiz result"


def save_result_report(file_path: Path, result: QuizResult) -> Path:
    """Write the report to ``file_path``; the suffix picks the format."""

    suffix = file_path.suffix.lower()
    if suffix in _MARKDOWN_SUFFIXES:
        document = render_result_markdown(result)
    elif suffix in _HTML_SUFFIXES:
        document = render_result_html(result)
    elif suffix in _PDF_SUFFIXES:
        document = None
    else:
        raise ReportExportError(
            f"Unsupported report format '{suffix or file_path.name}'. Use .pdf, .html or .md."
        )

    file_path = file_path.resolve()
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        if document is None:
            _write_pdf(file_path, result)
        else:
            file_path.write_text(document, encoding="utf-8")
    except OSError as exc:
        raise ReportExportError(f"Could not write report to '{file_path}': {exc}") from exc
    logger.info("Saved quiz report to %s", file_path)
    return file_path


def render_result_markdown(result: QuizResult) -> str:
    lines = [
        f"# {result.title or _DEFAULT_TITLE}",
        "",
        f"**{SCORE_TEMPLATE.format(score=result.score, total=result.total)}**",
    ]
    for position, evaluation in enumerate(result.evaluations, start=1):
        lines.append("")
        lines.extend(_evaluation_lines(position, evaluation))
    return "\n".join(lines) + "\n"


def render_result_html(result: QuizResult) -> str:
    return renderer.render_full_document(
        render_result_markdown(result),
        title=result.title or _DEFAULT_TITLE,
    )


def _evaluation_lines(position: int, evaluation: QuestionEvaluation) -> list[str]:
    verdict = VERDICT_CORRECT if evaluation.is_correct else VERDICT_WRONG
    heading, _, details = evaluation.question.text.partition("\n")
    lines = [f"## {position}. {heading}", ""]
    if details.strip():
        lines.extend([details.strip(), ""])
    return lines + [
        f"- Your answer: {_join_answers(evaluation.selected_answers)}",
        f"- Correct answer: {_join_answers(evaluation.correct_answers)}",
        f"- Verdict: **{verdict}**",
    ]


def _join_answers(answers: tuple[Answer, ...]) -> str:
    if not answers:
        return NOTHING_SELECTED
    return "; ".join(answer.text for answer in answers)


def _write_pdf(file_path: Path, result: QuizResult) -> None:
    # Deferred import: only the desktop player runs a Qt application.
    from PySide6.QtGui import QGuiApplication, QPageSize, QPdfWriter, QTextDocument

    if not isinstance(QGuiApplication.instance(), QGuiApplication):
        raise ReportExportError("PDF reports need the desktop player. Use .html or .md instead.")

    title = result.title or _DEFAULT_TITLE
    document = QTextDocument()
    document.setMetaInformation(QTextDocument.MetaInformation.DocumentTitle, title)
    document.setHtml(renderer.render_fragment(render_result_markdown(result)))

    writer = QPdfWriter(str(file_path))
    writer.setTitle(title)
    writer.setPageSize(QPageSize(QPageSize.PageSizeId.A4))
    document.print_(writer)
    del writer

    if not file_path.exists() or file_path.stat().st_size == 0:
        raise ReportExportError(f"Could not write PDF report to '{file_path}'.")
