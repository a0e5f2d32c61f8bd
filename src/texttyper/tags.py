"""Rich-text tag scanning.

Finds the next ``<name>``, ``<name=value>`` or ``</name>`` occurrence in a
string. The scanner is permissive: a tag whose ``>`` is missing is still
returned, flagged as not fully extracted, so truncated input never raises.

No regex: a single forward pass from the ``<`` to the terminator.

Thread Safety:
Tag is frozen (immutable). scan_next() keeps no state between calls.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

OPEN_DELIMITER = "<"
CLOSE_DELIMITER = ">"
PARAMETER_DELIMITER = "="
CLOSING_MARKER = "/"


class CustomTags:
    """Tag names interpreted by the reveal scheduler."""

    DELAY = "delay"
    SPEED = "speed"
    ANIM = "anim"
    ANIMATION = "animation"

    ALL = frozenset({DELAY, SPEED, ANIM, ANIMATION})
    ANIMATIONS = frozenset({ANIM, ANIMATION})


SPRITE_TAG = "sprite"

# Names the renderer interprets itself; passed through untouched
RENDERER_TAGS = frozenset(
    {
        "align",
        "alpha",
        "b",
        "color",
        "cspace",
        "font",
        "i",
        "indent",
        "line-height",
        "line-indent",
        "link",
        "lowercase",
        "margin",
        "mark",
        "mspace",
        "noparse",
        "nobr",
        "page",
        "pos",
        "s",
        "size",
        "smallcaps",
        "space",
        SPRITE_TAG,
        "strikethrough",
        "style",
        "sub",
        "sup",
        "u",
        "underline",
        "uppercase",
        "voffset",
        "width",
    }
)


@dataclass(frozen=True, slots=True)
class Tag:
    """A markup tag found in source text.

    Attributes:
        type: Lower-cased tag name without the closing slash
        is_closing: True for ``</name>``
        parameter: Text after the first ``=``, or None when absent
        raw_text: Exact substring of the source, including delimiters
        fully_extracted: False when no terminating ``>`` was found
        start: Offset of the opening ``<`` in the scanned string

    """

    type: str
    is_closing: bool
    parameter: str | None
    raw_text: str
    fully_extracted: bool
    start: int = 0

    @property
    def end(self) -> int:
        """Offset just past the tag's raw text."""
        return self.start + len(self.raw_text)

    @property
    def closing_text(self) -> str:
        """The closing form of this tag, e.g. ``</color>``."""
        return f"{OPEN_DELIMITER}{CLOSING_MARKER}{self.type}{CLOSE_DELIMITER}"

    @property
    def is_custom(self) -> bool:
        return self.type in CustomTags.ALL

    @property
    def is_sprite(self) -> bool:
        return self.type == SPRITE_TAG

    @property
    def is_renderer_tag(self) -> bool:
        return self.type in RENDERER_TAGS

    def __str__(self) -> str:
        return self.raw_text


def _ends_name(ch: str) -> bool:
    return ch in "=/<>" or ch.isspace()


def _read_tag(text: str, pos: int) -> Tag | None:
    """Read the tag whose ``<`` sits at pos, or None if it is not a tag."""
    length = len(text)
    i = pos + 1

    is_closing = i < length and text[i] == CLOSING_MARKER
    if is_closing:
        i += 1

    name_start = i
    while i < length and not _ends_name(text[i]):
        i += 1
    name = text[name_start:i]
    if not name or not name[0].isalpha():
        return None

    # Terminator: the next '>' or, failing that, the next '<' / end of text
    end = i
    while end < length and text[end] != CLOSE_DELIMITER and text[end] != OPEN_DELIMITER:
        end += 1

    fully_extracted = end < length and text[end] == CLOSE_DELIMITER
    body = text[i:end]
    eq = body.find(PARAMETER_DELIMITER)
    parameter = body[eq + 1 :] if eq != -1 else None

    raw_end = end + 1 if fully_extracted else end
    return Tag(
        type=name.lower(),
        is_closing=is_closing,
        parameter=parameter,
        raw_text=text[pos:raw_end],
        fully_extracted=fully_extracted,
        start=pos,
    )


def scan_next(text: str, start: int = 0) -> Tag | None:
    """Find the next tag at or after start.

    A ``<`` that is not followed by a usable name (``<>``, ``< >``, ``<3``)
    is skipped and the search continues with the next ``<``.

    Args:
        text: Source text (not modified)
        start: Offset to begin searching from

    Returns:
        The next Tag, or None if the rest of the text holds no tag.

    Example:
        >>> tag = scan_next("blah<color=red>boo</color")
        >>> tag.type, tag.parameter, tag.start, tag.fully_extracted
        ('color', 'red', 4, True)
        >>> scan_next("blah<color=red>boo</color", tag.end).fully_extracted
        False

    """
    pos = text.find(OPEN_DELIMITER, max(start, 0))
    while pos != -1:
        tag = _read_tag(text, pos)
        if tag is not None:
            return tag
        pos = text.find(OPEN_DELIMITER, pos + 1)
    return None


def iter_tags(text: str) -> Iterator[Tag]:
    """Yield every tag in text, left to right.

    Each search resumes at the end of the previous tag's raw text, which
    is always past its ``<``, so the loop always makes progress.
    """
    tag = scan_next(text)
    while tag is not None:
        yield tag
        tag = scan_next(text, tag.end)


__all__ = [
    "RENDERER_TAGS",
    "SPRITE_TAG",
    "CustomTags",
    "Tag",
    "iter_tags",
    "scan_next",
]
