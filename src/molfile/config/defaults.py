"""Format constants and default settings for molfile."""

# CTfile layout
RECORD_TERMINATOR = "$$$$"
SUPPORTED_VERSION = " V2000"
END_OF_PROPERTIES = "M  END"
HEADER_LINE_COUNT = 3
# header (3 lines) + count line
BODY_START_LINE = 4

# Two-digit header years below this pivot get the 2000s century
DATE_CENTURY_PIVOT = 80

# Splitter configuration defaults
DEFAULT_SPLITTER_CONFIG: dict[str, str | int] = {
    "encoding": "utf-8",
    "decode_errors": "replace",
    "min_trailing_length": 2,  # a lone stray character is not a record
}
