"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Edutainment Game"
SETTINGS_HEADING: str = "Game settings"
TABLE_SECTION_TITLE: str = "Select multiplication tables to practise"
COUNT_SECTION_TITLE: str = "Number of questions to answer"
TABLE_OPTION_TEMPLATE: str = "{number} times tables"
START_BUTTON_TEXT: str = "Start Game"
RESTART_BUTTON_TEXT: str = "Restart"
ANSWER_PLACEHOLDER: str = "Answer"

QUESTION_TEMPLATE: str = "{table} × {operand}"
SCORE_TEMPLATE: str = "Score: {score}"
REMAINING_TEMPLATE: str = "Remaining Questions: {remaining}"

CORRECT_MESSAGE: str = "Correct!"
INCORRECT_MESSAGE: str = "Incorrect!"
INVALID_MESSAGE: str = "Please enter a whole number."

SUMMARY_TITLE: str = "Well done!"
SUMMARY_TEMPLATE: str = "Final score is {score} out of {total}"
MISSED_HEADING: str = "Questions to practise:"
MISSED_TEMPLATE: str = "{table} × {operand} = {expected} (you answered {given})"
PLAY_AGAIN_BUTTON_TEXT: str = "Play again?"

MESSAGE_DISPLAY_MS: int = 1000
ANSWER_CLEAR_DELAY_MS: int = 200
ANSWER_ANIMATION_MS: int = 500
CORRECT_SCALE_FACTOR: float = 2.0
