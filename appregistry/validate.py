"""Validation rules for app manifest fields."""

from __future__ import annotations

import unicodedata

MAX_NAME_LENGTH = 17
"""Longest app name that displays properly in the mobile app."""

MAX_SUMMARY_LENGTH = 27
"""Longest app summary that displays properly in the mobile app."""

_PUNCTUATION = (".", "!", "?")
_SMALL_WORDS = " a an on the to of "
_STAR_EXT = ".star"


class ValidationError(ValueError):
    """Raised when a manifest field does not meet the app standards."""


def _is_letter(char: str) -> bool:
    return unicodedata.category(char).startswith("L")


def _is_number(char: str) -> bool:
    return unicodedata.category(char).startswith("N")


def _is_separator(char: str) -> bool:
    """Tell whether a character ends a word for title casing."""
    if ord(char) <= 0x7F:
        return not (char.isascii() and (char.isalnum() or char == "_"))
    if _is_letter(char) or unicodedata.category(char) == "Nd":
        return False
    return char.isspace()


def _title_char(char: str) -> str:
    titled = char.title()
    if len(titled) == 1:
        return titled
    upper = char.upper()
    return upper if len(upper) == 1 else char


def _title(text: str) -> str:
    """Upper-case the first letter of every word, leaving the rest alone."""
    result = []
    previous = " "
    for char in text:
        result.append(_title_char(char) if _is_separator(previous) else char)
        previous = char
    return "".join(result)


def _title_case(text: str) -> str:
    """Title-case words separated by spaces, keeping short joining words lower."""
    words = []
    for word in text.split(" "):
        if f" {word} " in _SMALL_WORDS and word != word[0]:
            words.append(word)
        else:
            words.append(_title(word))
    return " ".join(words)


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def _first_word_is_capitalised(text: str) -> bool:
    first = text.split(" ")[0]
    return first == _title(first)


def validate_name(name: str) -> None:
    """Check that an app name is present, title case and short enough."""
    if not name:
        raise ValidationError("name cannot be empty")
    if name != _title_case(name):
        raise ValidationError(
            f"'{name}' should be title case, 'Fuzzy Clock' for example"
        )
    if _byte_length(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"app names need to be less then {MAX_NAME_LENGTH} characters"
        )


def validate_summary(summary: str) -> None:
    """Check that a summary is short, capitalised and unpunctuated at the end."""
    if not summary:
        raise ValidationError("summary cannot be empty")
    if _byte_length(summary) > MAX_SUMMARY_LENGTH:
        raise ValidationError(
            f"app summaries need to be less then {MAX_SUMMARY_LENGTH} characters"
        )
    if summary.endswith(_PUNCTUATION):
        raise ValidationError("app summaries should not end in punctuation")
    if not _first_word_is_capitalised(summary):
        raise ValidationError(
            "app summaries should start with an uppercased character"
        )


def validate_desc(desc: str) -> None:
    """Check that a description is capitalised and ends in punctuation."""
    if not desc:
        raise ValidationError("desc cannot be empty")
    if not desc.endswith(_PUNCTUATION):
        raise ValidationError("app descriptions should end in punctuation")
    if not _first_word_is_capitalised(desc):
        raise ValidationError(
            "app descriptions should start with an uppercased character"
        )


def validate_author(author: str) -> None:
    """Check that an author is given."""
    if not author:
        raise ValidationError("author cannot be empty")


def validate_package_name(package_name: str) -> None:
    """Check that a package name is lower case letters and numbers only."""
    if not package_name:
        raise ValidationError("package names cannot be empty")
    if package_name != package_name.lower():
        raise ValidationError("package names should be lower case")
    if not all(_is_letter(c) or _is_number(c) for c in package_name):
        raise ValidationError(
            "package names can only contain letters, numbers, or an underscore character"
        )


def validate_file_name(file_name: str) -> None:
    """Check that a file name is a lower case ``.star`` source file name."""
    if not file_name:
        raise ValidationError("fileName cannot be empty")
    if not file_name.endswith(_STAR_EXT):
        raise ValidationError(f"file names should end in .star: '{file_name}'")
    stem = file_name[: -len(_STAR_EXT)]
    if stem != stem.lower():
        raise ValidationError("file names should be lower case")
    if not all(_is_letter(c) or _is_number(c) or c == "_" for c in stem):
        raise ValidationError(
            "file names can only contain letters, numbers, or an underscore character"
        )


def validate_id(app_id: str) -> None:
    """Check that an id is lower case letters, numbers and dashes only."""
    if not app_id:
        raise ValidationError("id cannot be empty")
    lowered = app_id.lower()
    if app_id != lowered:
        raise ValidationError(f"ids should be lower case, {app_id} != {lowered}")
    if not all(_is_letter(c) or _is_number(c) or c == "-" for c in app_id):
        raise ValidationError(
            "ids can only contain letters, numbers, or a dash character"
        )