"""Path values shared by every adapter.

A ``Path`` keeps the string the caller supplied (``original``) next to its
canonical form (``normalized``). The canonical form never starts with a
separator, never contains repeated separators and keeps a trailing separator
when the caller marked the path as a directory. The root is the empty string.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

SEPARATOR = "/"

_SEPARATORS = re.compile(r"[\\/]+")


@dataclass(frozen=True)
class Path:
    """Immutable path; equality and hashing only look at the normalized form."""

    normalized: str
    original: str = field(default="", compare=False)

    @property
    def is_directory(self) -> bool:
        return self.original.endswith((SEPARATOR, "\\"))

    @property
    def is_root(self) -> bool:
        return self.normalized == ""

    @property
    def segments(self) -> list[str]:
        return [s for s in self.normalized.split(SEPARATOR) if s]

    @property
    def name(self) -> str:
        """Final segment, or ``""`` for the root."""
        segments = self.segments
        return segments[-1] if segments else ""

    @property
    def parent(self) -> Path:
        segments = self.segments
        if len(segments) <= 1:
            return ROOT
        return _directory(SEPARATOR.join(segments[:-1]) + SEPARATOR)

    def has_traversal(self) -> bool:
        return ".." in self.segments

    def as_directory(self) -> Path:
        if self.is_directory or self.is_root:
            return self
        return _directory(self.normalized + SEPARATOR)

    def __str__(self) -> str:
        return self.normalized


def _directory(normalized: str) -> Path:
    return Path(normalized=normalized, original=normalized)


ROOT = Path(normalized="", original="")


def normalize(raw: str | None) -> Path:
    """Parse *raw* into a ``Path``.

    Empty, ``None`` and whitespace-only input, as well as a bare separator,
    yield the root.
    """
    if raw is None or not raw.strip():
        return Path(normalized="", original=raw or "")
    collapsed = _SEPARATORS.sub(SEPARATOR, raw)
    if collapsed.startswith(SEPARATOR):
        collapsed = collapsed[1:]
    return Path(normalized=collapsed, original=raw)


def combine(a: Path, b: Path) -> Path:
    """Join two paths with exactly one separator.

    The trailing component decides whether the result is directory-like.
    Joining anything with the root yields the other side.
    """
    if b.is_root:
        # keeps a's directory flag; a root tail carries no classification
        return a
    if a.is_root:
        return b
    joined = a.normalized.rstrip(SEPARATOR) + SEPARATOR + b.normalized
    return Path(normalized=joined, original=joined)


def with_root(root: Path | None, path: Path) -> Path:
    if root is None:
        return path
    return combine(root, path)


def strip_root(root: Path | None, path: Path) -> Path:
    """Remove *root* from the front of *path*; paths outside the root come back unchanged."""
    if root is None or root.is_root:
        return path
    prefix = root.normalized.rstrip(SEPARATOR)
    if path.normalized in (prefix, prefix + SEPARATOR):
        return ROOT
    if not path.normalized.startswith(prefix + SEPARATOR):
        return path
    rest = path.normalized[len(prefix) + 1 :]
    return Path(normalized=rest, original=rest)
