"""String cleanup and casing helpers.

Every function here accepts None and treats it as the empty string, which
makes them safe to map over partially-filled data.
"""

import re
import unicodedata

_NON_ALPHA = re.compile(r"[^a-zA-Z ]")
_NON_ALPHANUMERIC = re.compile(r"[^a-zA-Z0-9 ]")
_NON_DIGIT = re.compile(r"[^0-9]")
_WHITESPACE_RUN = re.compile(r"\s+")


def trim(text: str | None) -> str:
    """Strip leading and trailing whitespace.

    Example:
        >>> trim(" HELLO WORLD    \\n")
        'HELLO WORLD'
        >>> list(map(trim, [" hello ", " world "]))
        ['hello', 'world']
    """
    return (text or "").strip()


def lower(text: str | None) -> str:
    return (text or "").lower()


def upper(text: str | None) -> str:
    return (text or "").upper()


def is_whitespace(text: str | None) -> bool:
    """True if the text is empty or only whitespace."""
    return len(trim(text)) == 0


def is_not_whitespace(text: str | None) -> bool:
    return not is_whitespace(text)


def title(text: str | None) -> str:
    """Convert to Title Case.

    Words are separated by spaces; underscores count as spaces and hyphens
    are kept as part of the word.

    Example:
        >>> title("hello_world")
        'Hello World'
        >>> title("hello-world")
        'Hello-world'
        >>> title("HELLO wORLD")
        'Hello World'
    """
    words = lower(text).replace("_", " ").split(" ")
    return " ".join(upper(word[:1]) + word[1:] for word in words)


def kebab(text: str | None) -> str:
    """Convert to kebab-case.

    Example:
        >>> kebab("Hello World!")
        'hello-world'
        >>> kebab("  Clean THIS_up!! ")
        'clean-this-up'
    """
    return _WHITESPACE_RUN.sub("-", trim(_remove_punctuation(lower(text))))


def snake(text: str | None) -> str:
    """Convert to snake_case (kebab-case with underscores)."""
    return kebab(text).replace("-", "_")


def keep_alphabetical(text: str | None) -> str:
    """Drop everything except ASCII letters and spaces."""
    return _NON_ALPHA.sub("", text or "")


def keep_alphanumeric(text: str | None) -> str:
    """Drop everything except ASCII letters, digits and spaces."""
    return _NON_ALPHANUMERIC.sub("", text or "")


def keep_numeric(text: str | None) -> str:
    """Drop everything except digits, spaces included.

    Example:
        >>> keep_numeric("(555) 555-5555")
        '5555555555'
    """
    return _NON_DIGIT.sub("", text or "")


def _remove_punctuation(text: str) -> str:
    # Decompose accents so "é" keeps its base letter
    text = unicodedata.normalize("NFKD", text)
    text = re.sub(r"[-_]", " ", text)
    text = _WHITESPACE_RUN.sub(" ", text)
    return re.sub(r"[^a-zA-Z0-9\s]", "", text)
