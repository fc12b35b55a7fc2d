"""Utilities for importing quizzes from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    TITLE: Quiz title          (optional, first block only)
    ID: q-capitals             (optional, defaults to q<position>, skipping taken ids)
    Q: Question text (supports markdown + LaTeX). Additional lines until the
       next marker are treated as part of the question.
    A: First option text
    B: Second option text
    C: Third option text       (optional)
    D: Fourth option text      (optional)
    CORRECT: A                 (or several letters: A, C)

Example:

    TITLE: Warm-up

    Q: What is $2 + 2$?
    A: 3
    B: 4
    CORRECT: B

The importer produces the same structured payload as a JSON quiz file, with
answer ids taken from the lowercase option letters. It only reports syntax
problems; answer counts and correctness rules are checked when the payload
is loaded into a session.
"""

from __future__ import annotations

import re
from typing import Any

from quiz_player.core.errors import QuizImportError

_OPTION_ORDER = ["A", "B", "C", "D"]
_LETTER_SEPARATOR = re.compile(r"[\s,;]+")


def parse_quiz_text(text: str) -> dict[str, Any]:
    title: str | None = None
    questions: list[dict[str, Any]] = []
    for block_index, block in enumerate(_split_blocks(text)):
        block_title, question = _parse_block(block, allow_title=block_index == 0)
        if block_title is not None:
            title = block_title
        if question is not None:
            questions.append(question)

    _assign_default_ids(questions)
    # An empty list is left to load validation, like an empty JSON quiz.
    return {"title": title, "questions": questions}


def _assign_default_ids(questions: list[dict[str, Any]]) -> None:
    taken = {question["id"] for question in questions if "id" in question}
    next_number = 1
    for position, question in enumerate(questions, start=1):
        if "id" in question:
            continue
        next_number = max(next_number, position)
        while f"q{next_number}" in taken:
            next_number += 1
        question["id"] = f"q{next_number}"
        taken.add(question["id"])


def _split_blocks(text: str) -> list[str]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            # Blank line encountered after content - finalize current block
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())
    return [block for block in blocks if block]


def _parse_block(block: str, *, allow_title: bool) -> tuple[str | None, dict[str, Any] | None]:
    title: str | None = None
    question_id: str | None = None
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letters: list[str] | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("TITLE:"):
            if not allow_title:
                raise QuizImportError("TITLE may only appear in the first block.")
            title = line.split(":", 1)[1].strip()
            current_section = None
            continue

        if upper.startswith("ID:"):
            question_id = line.split(":", 1)[1].strip()
            if not question_id:
                raise QuizImportError("ID must not be empty.")
            current_section = None
            continue

        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            raw_value = line.split(":", 1)[1].strip().upper()
            correct_letters = [letter for letter in _LETTER_SEPARATOR.split(raw_value) if letter]
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            if letter in options:
                raise QuizImportError(f"Option {letter} is defined twice.")
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in _OPTION_ORDER:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    if not question_lines and not options and correct_letters is None and question_id is None:
        if title is None:
            raise QuizImportError("Encountered an empty quiz block.")
        return title, None

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError("Question text missing (Q: ...)")

    correct = set(correct_letters or [])
    unknown = sorted(letter for letter in correct if letter not in options)
    if unknown:
        raise QuizImportError(
            f"CORRECT refers to undefined option(s): {', '.join(unknown)}."
        )

    answers = []
    for letter in _OPTION_ORDER:
        if letter not in options:
            continue
        option_text = options[letter].strip()
        if not option_text:
            raise QuizImportError("Option text cannot be empty.")
        answers.append({"id": letter.lower(), "text": option_text, "correct": letter in correct})

    question: dict[str, Any] = {"text": question_text, "answers": answers}
    if question_id is not None:
        question["id"] = question_id
    return title, question
