"""Branch listing models and parser."""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from gitparse.exceptions import InvalidHashError, MalformedRecordError
from gitparse.hash import Hash
from gitparse.utils import RecordSequence, get_default_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

# HEAD marker, full ref name, short name, commit, upstream
BRANCH_FORMAT: Final = (
    "%(HEAD)%1f%(refname)%1f%(refname:short)%1f%(objectname)%1f%(upstream:short)"
)
BRANCH_LIST_ARGS: Final = (
    "for-each-ref",
    f"--format={BRANCH_FORMAT}",
    "refs/heads",
    "refs/remotes",
)
_BRANCH_FIELD_COUNT: Final = 5
_FIELD_SEPARATOR: Final = "\x1f"
_HEAD_MARKER: Final = "*"

_LOCAL_PREFIX: Final = "refs/heads/"
_REMOTE_PREFIX: Final = "refs/remotes/"


class BranchType(StrEnum):
    """Where a branch ref lives."""

    LOCAL = "local"
    REMOTE_TRACKING = "remote-tracking"


@dataclass(frozen=True, slots=True)
class Branch:
    """A local or remote-tracking branch.

    Attributes:
        name: Short ref name (``main``, ``origin/main``).
        branch_type: Local head or remote-tracking ref.
        is_current: Whether HEAD points at this branch.
        commit_hash: Commit the branch points to.
        upstream: Short name of the configured upstream, if any.
    """

    name: str
    branch_type: BranchType
    is_current: bool
    commit_hash: Hash
    upstream: str | None = None

    def is_local(self) -> bool:
        return self.branch_type is BranchType.LOCAL

    def is_remote(self) -> bool:
        return self.branch_type is BranchType.REMOTE_TRACKING

    def short_name(self) -> str:
        """Return the name without its remote (``origin/main`` -> ``main``)."""
        if self.is_remote():
            _, sep, rest = self.name.partition("/")
            if sep:
                return rest
        return self.name

    def __str__(self) -> str:
        marker = "*" if self.is_current else " "
        return f"{marker} {self.name}"


@dataclass(frozen=True, slots=True)
class BranchList(RecordSequence[Branch]):
    """Branches in listing order.

    At most one branch is current; none when HEAD is detached.
    """

    branches: tuple[Branch, ...] = ()

    def _records(self) -> tuple[Branch, ...]:
        return self.branches

    def local(self) -> Iterator[Branch]:
        return (b for b in self.branches if b.is_local())

    def remote(self) -> Iterator[Branch]:
        return (b for b in self.branches if b.is_remote())

    def current(self) -> Branch | None:
        """Return the branch HEAD points at, if any."""
        return next((b for b in self.branches if b.is_current), None)

    def find(self, name: str) -> Branch | None:
        return next((b for b in self.branches if b.name == name), None)

    def find_by_short_name(self, short_name: str) -> Branch | None:
        """Return the first branch whose remote-less name is ``short_name``."""
        return next((b for b in self.branches if b.short_name() == short_name), None)

    def local_count(self) -> int:
        return sum(1 for b in self.branches if b.is_local())

    def remote_count(self) -> int:
        return sum(1 for b in self.branches if b.is_remote())


def _branch_type(refname: str, line_number: int, line: str) -> BranchType:
    if refname.startswith(_LOCAL_PREFIX):
        return BranchType.LOCAL
    if refname.startswith(_REMOTE_PREFIX):
        return BranchType.REMOTE_TRACKING
    msg = f"Ref {refname!r} is neither a local head nor a remote-tracking ref"
    raise MalformedRecordError(msg, line_number=line_number, line=line)


def parse_branches(
    output: str,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> BranchList:
    """Parse ``for-each-ref`` output rendered with :data:`BRANCH_FORMAT`.

    Symbolic ``refs/remotes/<remote>/HEAD`` entries are skipped.

    Raises:
        MalformedRecordError: If a line does not have five fields, names a
            ref outside heads/remotes, or more than one line is marked current.
        InvalidHashError: If a commit hash is not hexadecimal.
    """
    log = logger if logger is not None else get_default_logger()
    branches: list[Branch] = []
    current_line: int | None = None

    for line_number, line in enumerate(output.split("\n"), start=1):
        if not line.strip():
            continue
        fields = line.split(_FIELD_SEPARATOR)
        if len(fields) != _BRANCH_FIELD_COUNT:
            msg = f"Expected {_BRANCH_FIELD_COUNT} fields in branch line, found {len(fields)}"
            raise MalformedRecordError(
                msg,
                expected_fields=_BRANCH_FIELD_COUNT,
                actual_fields=len(fields),
                line_number=line_number,
                line=line,
            )
        head, refname, short, objectname, upstream = fields

        branch_type = _branch_type(refname, line_number, line)
        if branch_type is BranchType.REMOTE_TRACKING and refname.endswith("/HEAD"):
            log.debug("Skipping symbolic remote HEAD", ref=refname)
            continue

        is_current = head.strip() == _HEAD_MARKER
        if is_current:
            if current_line is not None:
                msg = f"Lines {current_line} and {line_number} are both marked current"
                raise MalformedRecordError(msg, line_number=line_number, line=line)
            current_line = line_number

        try:
            commit_hash = Hash.parse(objectname)
        except InvalidHashError as e:
            raise InvalidHashError(
                str(e), value=e.value, line_number=line_number, line=line
            ) from e

        branches.append(
            Branch(
                name=short,
                branch_type=branch_type,
                is_current=is_current,
                commit_hash=commit_hash,
                upstream=upstream or None,
            )
        )

    log.debug("Parsed branch listing", branches=len(branches))
    return BranchList(tuple(branches))
