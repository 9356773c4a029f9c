"""Remote listing parser for ``remote -v`` output."""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from gitparse.exceptions import MalformedRecordError
from gitparse.utils import RecordSequence, get_default_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

REMOTE_LIST_ARGS: Final = ("remote", "-v")

_REMOTE_LINE: Final = re.compile(r"^(?P<name>\S+)\t(?P<url>.*) \((?P<kind>fetch|push)\)$")


@dataclass(frozen=True, slots=True)
class Remote:
    """A configured remote.

    Attributes:
        name: Remote name.
        fetch_url: URL fetched from.
        push_url: URL pushed to, when it differs from ``fetch_url``.
    """

    name: str
    fetch_url: str
    push_url: str | None = None

    def effective_push_url(self) -> str:
        """Return the URL pushes go to."""
        return self.push_url if self.push_url is not None else self.fetch_url


@dataclass(frozen=True, slots=True)
class RemoteList(RecordSequence[Remote]):
    """Remotes in listing order."""

    remotes: tuple[Remote, ...] = ()

    def _records(self) -> tuple[Remote, ...]:
        return self.remotes

    def find(self, name: str) -> Remote | None:
        return next((r for r in self.remotes if r.name == name), None)


def parse_remotes(
    output: str,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> RemoteList:
    """Parse ``remote -v`` output into one entry per remote name.

    Raises:
        MalformedRecordError: If a line is not ``name<TAB>url (fetch|push)``
            or a remote has a push URL but no fetch URL.
    """
    log = logger if logger is not None else get_default_logger()
    fetch: dict[str, str] = {}
    push: dict[str, str] = {}
    order: list[str] = []

    for line_number, line in enumerate(output.split("\n"), start=1):
        if not line.strip():
            continue
        match = _REMOTE_LINE.match(line)
        if match is None:
            msg = "Expected 'name<TAB>url (fetch|push)'"
            raise MalformedRecordError(msg, line_number=line_number, line=line)
        name = match["name"]
        if name not in order:
            order.append(name)
        target = fetch if match["kind"] == "fetch" else push
        target[name] = match["url"]

    remotes: list[Remote] = []
    for name in order:
        if name not in fetch:
            msg = f"Remote {name!r} has no fetch URL"
            raise MalformedRecordError(msg)
        push_url = push.get(name)
        remotes.append(
            Remote(
                name=name,
                fetch_url=fetch[name],
                push_url=push_url if push_url != fetch[name] else None,
            )
        )

    log.debug("Parsed remote listing", remotes=len(remotes))
    return RemoteList(tuple(remotes))
