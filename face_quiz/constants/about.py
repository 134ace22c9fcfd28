"""Static metadata describing FaceQuiz."""

APP_NAME = "FaceQuiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "FaceQuiz helps you remember the people you meet. Pick one or more categories, "
    "narrow them down with tags, and name the person behind each photo or hint."
)

HELP_TEXT = (
    "Import a contacts file (JSON) exported from your address book, or place it next to "
    "the application as contacts.json to load it on start-up. Each contact needs a photo "
    "or a written hint to appear in the quiz:\n\n"
    '{"contacts": [\n'
    '  {"id": "1", "name": "Ada Lovelace", "photo": "photos/ada.jpg",\n'
    '   "category": "work", "groups": ["analytics"]},\n'
    '  {"id": "2", "name": "Grace Hopper", "hint": "Found the first *bug*",\n'
    '   "category": "Community"}\n'
    "]}\n\n"
    "Select categories (and optionally tags) to build the pool of people. At least five "
    "eligible contacts are needed. A wrong answer can be retried; a correct one moves on "
    "to the next person."
)
