"""Static metadata describing QuizPlayer."""

APP_NAME = "QuizPlayer"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizPlayer is a single-player multiple-choice quiz runner built with Qt and FastAPI. "
    "Load a quiz from JSON or text, answer each question, and export a scored report."
)

HELP_TEXT = (
    "Quizzes are loaded from a JSON file, a URL, or a .txt file in the import format:\n\n"
    "TITLE: Geometry warm-up\n\n"
    "Q: What is $30^o$ in radians?\n"
    "A: \\frac{\\pi}{2}\nB: \\frac{\\pi}{6}\nC: \\frac{\\pi}{3}\n"
    "CORRECT: B\n\n"
    "Q: Which of these are prime?\n"
    "A: 2\nB: 4\nC: 7\nD: 9\n"
    "CORRECT: A, C\n\n"
    "Select every answer you believe is correct. A question only counts when the "
    "selection matches the correct answers exactly."
)
