"""Quiz-related constants shared across UI and core layers."""

MIN_ANSWERS_PER_QUESTION: int = 2
MAX_ANSWERS_PER_QUESTION: int = 4
DEFAULT_QUIZ_LOCATION: str = "assets/questions.json"
DEFAULT_REPORT_FILENAME: str = "quiz-result.pdf"
