"""Quiz-related constants shared across UI and core layers."""

ROUND_COUNT: int = 5
OPTIONS_PER_ROUND: int = 5
MIN_POOL_SIZE: int = OPTIONS_PER_ROUND
CORRECT_ADVANCE_DELAY_MS: int = 600
INCORRECT_CLEAR_DELAY_MS: int = 300
DEFAULT_CONTACTS_FILE: str = "contacts.json"
