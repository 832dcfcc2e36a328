"""Languages offered to clients.

Requests are not validated against this list; any identifier the model
understands can be used as a target.
"""

from typing import List

SUPPORTED_LANGUAGES = (
    "English", "Spanish", "French", "German", "Italian", "Portuguese",
    "Russian", "Japanese", "Korean", "Chinese", "Arabic", "Hindi",
    "Dutch", "Swedish", "Norwegian", "Danish", "Finnish", "Polish",
    "Turkish", "Greek", "Hebrew", "Thai", "Vietnamese", "Indonesian",
)


def get_supported_languages() -> List[str]:
    return list(SUPPORTED_LANGUAGES)
