from askterm import __version__


APPLICATION_NAME: str = __name__[: __name__.index(".")]
APPLICATION_VERSION: str = __version__

CONFIG_VERSION: str = "0.1"

# the cursor is moved this far left to guarantee it lands on column 0
CLEAN_CURSOR_COLUMNS: int = 300

DEFAULT_ERROR_MESSAGE: str = "Please enter a valid value"
ERROR_MARKER: str = ">> "

QUESTION_GLYPH: str = "?"
QUESTION_SEPARATOR: str = ": "

RAWLIST_ANSWER_PROMPT: str = "  Answer: "
RAWLIST_INDENT: str = "  "
RAWLIST_INVALID_INDEX_MESSAGE: str = "Please enter a valid index"

SEPARATOR_LINE: str = "--------"
