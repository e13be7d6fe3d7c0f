"""The manifest describing an app, and helpers to derive its identifiers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .validate import (
    validate_author,
    validate_desc,
    validate_file_name,
    validate_id,
    validate_name,
    validate_package_name,
    validate_summary,
)


@dataclass
class Manifest:
    """Describes one app: its identity, display text and source."""

    id: str
    name: str
    summary: str
    desc: str
    author: str
    file_name: str
    package_name: str
    source: bytes = field(default=b"", repr=False)

    def validate(self) -> None:
        """Raise ValidationError for the first field that breaks the rules."""
        validate_id(self.id)
        validate_name(self.name)
        validate_summary(self.summary)
        validate_desc(self.desc)
        validate_author(self.author)
        validate_file_name(self.file_name)
        validate_package_name(self.package_name)

    def to_dict(self) -> dict[str, Any]:
        """Return the serialisable fields; the source is left out."""
        return {
            "id": self.id,
            "name": self.name,
            "summary": self.summary,
            "desc": self.desc,
            "author": self.author,
            "file_name": self.file_name,
            "package_name": self.package_name,
        }


def generate_package_name(name: str) -> str:
    """Derive a package name from an app name."""
    cleaned = name.replace("-", "").replace("_", "")
    return "".join(cleaned.split()).lower()


def generate_id(name: str) -> str:
    """Derive an app id from an app name."""
    return "-".join(name.replace("_", "-").split()).lower()


def generate_file_name(name: str) -> str:
    """Derive the source file name from an app name."""
    return "_".join(name.replace("-", "_").split()).lower() + ".star"