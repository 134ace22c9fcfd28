"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "FaceQuiz"

BUTTON_IMPORT_CONTACTS: str = "Import Contacts"
BUTTON_ABOUT: str = "About FaceQuiz"
BUTTON_HELP: str = "Help"
BUTTON_SETTINGS: str = "Settings"
BUTTON_PLAY_AGAIN: str = "Play Again"
BUTTON_SELECT_ALL_CATEGORIES: str = "All / None"
BUTTON_SELECT_ALL_TAGS: str = "All / None"

IMPORT_DIALOG_TITLE: str = "Select contacts file"
IMPORT_FILE_FILTER: str = "Contact files (*.json);;All files (*.*)"

CATEGORY_GROUP_TITLE: str = "Categories"
TAG_GROUP_TITLE: str = "Tags"
NO_TAGS_MESSAGE: str = "No tags in the selected categories."

SELECT_CATEGORIES_TITLE: str = "Select Categories to Start Quiz"
SELECT_CATEGORIES_MESSAGE: str = "Choose one or more categories to practice with."
NOT_ENOUGH_CONTACTS_TEMPLATE: str = (
    "Only {count} found. Minimum {minimum} contacts with photos or hints required."
)
NOT_ENOUGH_CONTACTS_HINT: str = (
    "You need at least {minimum} contacts with photos or hints to play the quiz. "
    "Try selecting more categories or tags."
)
LOADING_MESSAGE: str = "Preparing the next round…"
PROGRESS_TEMPLATE: str = "{current} of {total}"
SCORE_TEMPLATE: str = "Score: {score}"
HINT_LABEL: str = "Hint"
NO_PHOTO_TEXT: str = "No Photo"
LOADING_PHOTO_TEXT: str = "Loading photo…"
QUIZ_COMPLETE_TITLE: str = "Well done!"
QUIZ_COMPLETE_TEMPLATE: str = "You named {score} of {total} people."
