"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizPlayer"
START_HEADING: str = "Welcome to the quiz"
START_DESCRIPTION: str = "Questions are loaded when the quiz starts."

START_BUTTON: str = "Start Quiz"
START_BUTTON_LOADING: str = "Loading…"
CHOOSE_FILE_BUTTON: str = "Choose quiz file…"
IMPORT_DIALOG_TITLE: str = "Select quiz file"
IMPORT_FILE_FILTER: str = "Quiz files (*.json *.txt);;All files (*.*)"

PROGRESS_TEMPLATE: str = "Question {current} / {total}"
NEXT_BUTTON: str = "Next"
SHOW_RESULT_BUTTON: str = "Show Result"
NO_SELECTION_MESSAGE: str = "Select at least one answer to continue."

RESULT_HEADING: str = "Result"
SCORE_TEMPLATE: str = "{score} of {total} correct"
PLAY_AGAIN_BUTTON: str = "Play Again"
HOME_BUTTON: str = "Back to Start"
EXPORT_BUTTON: str = "Export Report…"
EXPORT_DIALOG_TITLE: str = "Save quiz report"
EXPORT_FILE_FILTER: str = "PDF report (*.pdf);;HTML report (*.html);;Markdown report (*.md)"

VERDICT_CORRECT: str = "Correct"
VERDICT_WRONG: str = "Wrong"
NOTHING_SELECTED: str = "(nothing selected)"
