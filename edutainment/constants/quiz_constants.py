"""Quiz-related constants shared across UI and core layers."""

MIN_TABLE_NUMBER: int = 1
MAX_TABLE_NUMBER: int = 12
MIN_OPERAND: int = 1
MAX_OPERAND: int = 12
QUESTION_COUNT_CHOICES: tuple[int, ...] = (5, 10, 20)

DEFAULT_TABLE_NUMBER: int = 1
DEFAULT_QUESTION_COUNT: int = 10
