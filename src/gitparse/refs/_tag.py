"""Tag listing models and parser.

Whether a tag is annotated is decided by the object type the tag ref
points at, never by the presence of message text: a lightweight tag on a
commit reports that commit's message in ``%(contents)``.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from gitparse.exceptions import InvalidHashError, MalformedRecordError
from gitparse.hash import Hash
from gitparse.log import Author
from gitparse.utils import RecordSequence, get_default_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

# name, object type, object, peeled object, tagger name/email/date, contents
TAG_FORMAT: Final = (
    "%(refname:short)%1f%(objecttype)%1f%(objectname)%1f%(*objectname)%1f"
    "%(taggername)%1f%(taggeremail)%1f%(taggerdate:unix)%1f%(contents)%1e"
)
TAG_LIST_ARGS: Final = ("for-each-ref", f"--format={TAG_FORMAT}", "refs/tags")
_TAG_FIELD_COUNT: Final = 8
_FIELD_SEPARATOR: Final = "\x1f"
_RECORD_TERMINATOR: Final = "\x1e"
_ANNOTATED_OBJECT_TYPE: Final = "tag"


class TagType(StrEnum):
    LIGHTWEIGHT = "lightweight"
    ANNOTATED = "annotated"


@dataclass(frozen=True, slots=True)
class Tag:
    """A tag ref.

    Lightweight tags never carry a message or tagger.

    Attributes:
        name: Tag name.
        hash: Commit (or other object) the tag ultimately points to.
        tag_type: Lightweight or annotated.
        message: Annotation text, if annotated and non-empty.
        tagger: Who created the annotation, if annotated.
    """

    name: str
    hash: Hash
    tag_type: TagType
    message: str | None = None
    tagger: Author | None = None

    def __post_init__(self) -> None:
        if self.tag_type is TagType.LIGHTWEIGHT and (
            self.message is not None or self.tagger is not None
        ):
            msg = "Lightweight tags cannot carry a message or tagger"
            raise ValueError(msg)

    def is_annotated(self) -> bool:
        return self.tag_type is TagType.ANNOTATED

    def __str__(self) -> str:
        return f"{self.name} -> {self.hash.short()}"


@dataclass(frozen=True, slots=True)
class TagList(RecordSequence[Tag]):
    """Tags in listing order."""

    tags: tuple[Tag, ...] = ()

    def _records(self) -> tuple[Tag, ...]:
        return self.tags

    def lightweight(self) -> Iterator[Tag]:
        return (t for t in self.tags if t.tag_type is TagType.LIGHTWEIGHT)

    def annotated(self) -> Iterator[Tag]:
        return (t for t in self.tags if t.tag_type is TagType.ANNOTATED)

    def find(self, name: str) -> Tag | None:
        return next((t for t in self.tags if t.name == name), None)

    def find_containing(self, text: str) -> Iterator[Tag]:
        """Yield tags whose name contains ``text``."""
        return (t for t in self.tags if text in t.name)

    def for_commit(self, hash_: Hash) -> Iterator[Tag]:
        """Yield tags pointing at ``hash_``."""
        return (t for t in self.tags if t.hash == hash_)

    def lightweight_count(self) -> int:
        return sum(1 for _ in self.lightweight())

    def annotated_count(self) -> int:
        return sum(1 for _ in self.annotated())


def _parse_tagger(
    name: str, email: str, date: str, record_number: int, record: str
) -> Author:
    try:
        timestamp = datetime.fromtimestamp(int(date), UTC)
    except (ValueError, OverflowError, OSError) as e:
        msg = f"Invalid tagger timestamp {date!r}"
        raise MalformedRecordError(msg, line_number=record_number, line=record) from e
    return Author(name=name, email=email.strip("<>"), timestamp=timestamp)


def _parse_record(record: str, record_number: int) -> Tag:
    fields = record.split(_FIELD_SEPARATOR)
    if len(fields) != _TAG_FIELD_COUNT:
        msg = f"Expected {_TAG_FIELD_COUNT} fields in tag record, found {len(fields)}"
        raise MalformedRecordError(
            msg,
            expected_fields=_TAG_FIELD_COUNT,
            actual_fields=len(fields),
            line_number=record_number,
            line=record,
        )
    name, objecttype, objectname, peeled, tagger_name, tagger_email, tagger_date, contents = (
        fields
    )

    annotated = objecttype == _ANNOTATED_OBJECT_TYPE
    try:
        # Annotated tags point at a tag object; report the object it wraps.
        hash_ = Hash.parse(peeled if annotated and peeled else objectname)
    except InvalidHashError as e:
        raise InvalidHashError(
            str(e), value=e.value, line_number=record_number, line=record
        ) from e

    if not annotated:
        return Tag(name=name, hash=hash_, tag_type=TagType.LIGHTWEIGHT)

    tagger = None
    if tagger_name or tagger_email:
        tagger = _parse_tagger(
            tagger_name, tagger_email, tagger_date, record_number, record
        )
    return Tag(
        name=name,
        hash=hash_,
        tag_type=TagType.ANNOTATED,
        message=contents.strip() or None,
        tagger=tagger,
    )


def parse_tags(
    output: str,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> TagList:
    """Parse ``for-each-ref`` output rendered with :data:`TAG_FORMAT`.

    Raises:
        MalformedRecordError: If a record does not have eight fields or the
            tagger date is not a unix timestamp.
        InvalidHashError: If an object name is not hexadecimal.
    """
    log = logger if logger is not None else get_default_logger()
    tags: list[Tag] = []
    for record_number, chunk in enumerate(output.split(_RECORD_TERMINATOR), start=1):
        record = chunk.lstrip("\n")
        if not record.strip():
            continue
        tags.append(_parse_record(record, record_number))

    log.debug("Parsed tag listing", tags=len(tags))
    return TagList(tuple(tags))
