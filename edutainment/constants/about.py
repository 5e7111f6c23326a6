"""Static metadata describing Edutainment."""

APP_NAME = "Edutainment"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "Edutainment is a small times-tables practice game built with Qt. "
    "Pick a table, pick how many questions to answer, and see how many you get right."
)

HELP_MARKDOWN = """\
## How to play

1. Choose the **times table** you want to practise (1 to 12).
2. Choose how many questions to answer: **5**, **10** or **20**.
3. Press **Start Game**.

Each question looks like `4 × 7`. Type your answer and press **Enter**.

- A correct answer scores one point.
- Every answer, right or wrong, uses up one question.
- Anything that is not a whole number is ignored, so just try again.

Press **Restart** at any time to go back to the settings.
"""
