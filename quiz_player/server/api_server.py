"""FastAPI server that lets a browser play the quiz session."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
import uvicorn

from quiz_player.constants.about import APP_NAME, APP_VERSION
from quiz_player.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from quiz_player.constants.quiz_constants import DEFAULT_QUIZ_LOCATION
from quiz_player.core.errors import QuizLoadError, QuizLoadInProgressError, QuizValidationError
from quiz_player.core.markdown_math_renderer import renderer
from quiz_player.core.models import Answer, QuestionEvaluation
from quiz_player.core.quiz_session import QuizSession
from quiz_player.core.result_exporter import render_result_html
from quiz_player.core.services.quiz_source import QuizSource, source_for_location

SourceFactory = Callable[[str], QuizSource]

logger = logging.getLogger(__name__)

_PLAYER_PAGE_HTML = """<!doctype html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <title>QuizPlayer</title>
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <style>
      :root { font-family: 'Inter', system-ui, sans-serif; background: #f5f5f5; color: #1e1e1e; }
      body { margin: 0 auto; padding: 1.5rem; max-width: 48rem; display: flex; flex-direction: column; gap: 1rem; }
      .card { background: #fff; border-radius: 0.75rem; padding: 1.5rem; box-shadow: 0 0.25rem 1rem rgba(0, 0, 0, 0.08); }
      .hidden { display: none; }
      .primary-button { border: none; border-radius: 0.5rem; padding: 0.7rem 1.3rem; font-size: 1rem; background: #0078d4; color: #fff; cursor: pointer; }
      .primary-button:disabled { opacity: 0.6; cursor: wait; }
      .answers { display: grid; gap: 0.5rem; margin: 1rem 0; }
      .answer { text-align: left; padding: 0.7rem 1rem; border-radius: 0.5rem; border: 1px solid #d1d1d1; background: #fff; cursor: pointer; font-size: 1rem; }
      .answer.selected { border-color: #0078d4; background: #e5f1fb; }
      .progress { opacity: 0.7; }
      .error { color: #d13438; }
      .ok { color: #107c10; }
      .nok { color: #d13438; }
    </style>
    <script>
      window.MathJax = { tex: { inlineMath: [['$','$']], displayMath: [['$$','$$']] }, svg: { fontCache: 'global' } };
    </script>
    <script defer src=\"https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js\"></script>
  </head>
  <body>
    <section class=\"card\" id=\"start-card\">
      <h1>Welcome to the quiz</h1>
      <p class=\"progress\">Questions are loaded when the quiz starts.</p>
      <button id=\"start-button\" class=\"primary-button\">Start Quiz</button>
      <p id=\"start-error\" class=\"error\"></p>
    </section>
    <section class=\"card hidden\" id=\"quiz-card\">
      <div id=\"progress\" class=\"progress\"></div>
      <div id=\"question\"></div>
      <div id=\"answers\" class=\"answers\"></div>
      <button id=\"next-button\" class=\"primary-button\" disabled>Next</button>
    </section>
    <section class=\"card hidden\" id=\"result-card\">
      <h2>Result</h2>
      <p id=\"score\"></p>
      <ol id=\"breakdown\"></ol>
      <button id=\"again-button\" class=\"primary-button\">Play Again</button>
      <a href=\"/result/report\" target=\"_blank\">Printable report</a>
    </section>
    <script>
      const startCard = document.getElementById('start-card');
      const quizCard = document.getElementById('quiz-card');
      const resultCard = document.getElementById('result-card');
      const startButton = document.getElementById('start-button');
      const startError = document.getElementById('start-error');
      const nextButton = document.getElementById('next-button');

      function show(card) {
        for (const element of [startCard, quizCard, resultCard]) {
          element.classList.toggle('hidden', element !== card);
        }
      }

      async function call(method, url) {
        const response = await fetch(url, { method, headers: { 'Content-Type': 'application/json' }, body: method === 'POST' ? '{}' : undefined });
        const body = await response.json();
        if (!response.ok) {
          throw new Error(body.detail ?? 'Request failed.');
        }
        return body;
      }

      function renderState(state) {
        if (!state.question) {
          show(startCard);
          return;
        }
        show(quizCard);
        document.getElementById('progress').textContent = state.progress;
        document.getElementById('question').innerHTML = state.question.html;
        const answers = document.getElementById('answers');
        answers.innerHTML = '';
        for (const answer of state.question.answers) {
          const button = document.createElement('button');
          button.className = 'answer' + (answer.selected ? ' selected' : '');
          button.textContent = answer.text;
          button.onclick = async () => renderState(await call('POST', `/answers/${encodeURIComponent(answer.id)}/toggle`));
          answers.appendChild(button);
        }
        nextButton.disabled = !state.has_selection;
        nextButton.textContent = state.finished ? 'Show Result' : 'Next';
        if (window.MathJax && window.MathJax.typeset) {
          window.MathJax.typeset();
        }
      }

      async function showResult() {
        const result = await call('GET', '/result');
        show(resultCard);
        document.getElementById('score').textContent = `${result.score} of ${result.total} correct`;
        const breakdown = document.getElementById('breakdown');
        breakdown.innerHTML = '';
        for (const evaluation of result.evaluations) {
          const item = document.createElement('li');
          const selected = evaluation.selected_answers.map(a => a.text).join('; ') || '(nothing selected)';
          item.className = evaluation.is_correct ? 'ok' : 'nok';
          item.textContent = `${evaluation.question_text}: ${selected}`;
          breakdown.appendChild(item);
        }
      }

      startButton.onclick = async () => {
        startButton.disabled = true;
        startButton.textContent = 'Loading…';
        startError.textContent = '';
        try {
          renderState(await call('POST', '/load'));
        } catch (error) {
          startError.textContent = error.message;
        } finally {
          startButton.disabled = false;
          startButton.textContent = 'Start Quiz';
        }
      };

      nextButton.onclick = async () => {
        const state = await call('GET', '/state');
        if (state.finished) {
          await showResult();
        } else {
          renderState(await call('POST', '/advance'));
        }
      };

      document.getElementById('again-button').onclick = async () => renderState(await call('POST', '/restart'));

      call('GET', '/state').then(renderState);
    </script>
  </body>
</html>
"""


class LoadPayload(BaseModel):
    """Payload schema for loading a quiz; ``location`` falls back to the server default.

    Other locations must be relative names inside the server's quiz directory.
    """

    location: str | None = None


def _is_remote(location: str) -> bool:
    return "://" in location


def resolve_requested_location(
    requested: str | None, default_location: str, quiz_directory: Path | None
) -> str:
    """Map a client-requested quiz to a location the server is willing to read."""
    if not requested or requested == default_location:
        return default_location

    candidate = Path(requested)
    if (
        quiz_directory is None
        or _is_remote(requested)
        or candidate.is_absolute()
        or ".." in candidate.parts
    ):
        logger.warning("Rejected quiz location from client: %s", requested)
        raise HTTPException(status_code=403, detail=f"Quiz location '{requested}' is not allowed.")
    return str(quiz_directory / candidate)


def _get_session_dependency(session: QuizSession):
    def dependency() -> QuizSession:
        return session

    return dependency


def _answer_summary(answer: Answer) -> dict[str, object]:
    return {"id": answer.id, "text": answer.text}


def _evaluation_summary(evaluation: QuestionEvaluation) -> dict[str, object]:
    return {
        "question_id": evaluation.question.id,
        "question_text": evaluation.question.text,
        "selected_answers": [_answer_summary(a) for a in evaluation.selected_answers],
        "correct_answers": [_answer_summary(a) for a in evaluation.correct_answers],
        "is_correct": evaluation.is_correct,
    }


def describe_state(session: QuizSession) -> dict[str, object]:
    """Snapshot of the session for the player page. Correctness is never included."""
    question = session.current_question()
    question_summary = None
    if question is not None:
        selected = session.selected_answer_ids()
        question_summary = {
            "id": question.id,
            "text": question.text,
            "html": renderer.render_fragment(question.text),
            "answers": [
                {"id": answer.id, "text": answer.text, "selected": answer.id in selected}
                for answer in question.answers
            ],
        }
    quiz = session.quiz
    return {
        "loaded": session.has_loaded_quiz(),
        "loading": session.is_loading(),
        "title": quiz.title if quiz else None,
        "current_index": session.current_index,
        "total": session.total_questions(),
        "progress": session.progress_label(),
        "finished": session.is_finished(),
        "has_selection": session.has_selection(),
        "question": question_summary,
    }


def create_api_app(
    session: QuizSession,
    source_factory: SourceFactory = source_for_location,
    default_location: str = DEFAULT_QUIZ_LOCATION,
    quiz_directory: Path | None = None,
) -> FastAPI:
    """
    Create a FastAPI application wired to the provided quiz session.

    :param quiz_directory: Directory clients may pick quizzes from; defaults to
        the directory of a local ``default_location``. A remote default allows
        no other locations.
    """
    app = FastAPI(title=f"{APP_NAME} API", version=APP_VERSION)
    session_dep = _get_session_dependency(session)
    if quiz_directory is None and not _is_remote(default_location):
        quiz_directory = Path(default_location).parent

    @app.get("/", response_class=HTMLResponse)
    async def serve_player_page() -> str:
        return _PLAYER_PAGE_HTML

    @app.get("/state")
    async def get_state(current: QuizSession = Depends(session_dep)) -> dict[str, object]:
        return describe_state(current)

    @app.post("/load")
    async def load_quiz(
        payload: LoadPayload | None = None,
        current: QuizSession = Depends(session_dep),
    ) -> dict[str, object]:
        location = resolve_requested_location(
            payload.location if payload else None, default_location, quiz_directory
        )
        try:
            await current.load_from_source(source_factory(location), location)
        except QuizValidationError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except QuizLoadInProgressError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except QuizLoadError as exc:
            raise HTTPException(status_code=502, detail=str(exc)) from exc
        return describe_state(current)

    @app.post("/answers/{answer_id}/toggle")
    async def toggle_answer(
        answer_id: str, current: QuizSession = Depends(session_dep)
    ) -> dict[str, object]:
        current.toggle_answer(answer_id)
        return describe_state(current)

    @app.post("/advance")
    async def advance(current: QuizSession = Depends(session_dep)) -> dict[str, object]:
        current.advance()
        return describe_state(current)

    @app.post("/restart")
    async def restart(current: QuizSession = Depends(session_dep)) -> dict[str, object]:
        current.restart()
        return describe_state(current)

    @app.get("/result")
    async def get_result(current: QuizSession = Depends(session_dep)) -> dict[str, object]:
        if not current.has_loaded_quiz():
            raise HTTPException(status_code=409, detail="No quiz has been loaded.")
        result = current.result()
        return {
            "title": result.title,
            "score": result.score,
            "total": result.total,
            "evaluations": [_evaluation_summary(e) for e in result.evaluations],
        }

    @app.get("/result/report", response_class=HTMLResponse)
    async def get_result_report(current: QuizSession = Depends(session_dep)) -> str:
        if not current.has_loaded_quiz():
            raise HTTPException(status_code=409, detail="No quiz has been loaded.")
        return render_result_html(current.result())

    return app


def run_api_server(
    session: QuizSession,
    default_location: str = DEFAULT_QUIZ_LOCATION,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Serve the web player until interrupted."""
    app = create_api_app(session, default_location=default_location)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)
    server.run()
