"""Short-form status decoding.

Example:
    >>> from gitparse.status import parse_status
    >>> status = parse_status("M  file.txt\\n?? new.txt\\n")
    >>> [e.to_code() for e in status]
    ['M ', ' ?']
"""

from gitparse.status._models import FileEntry, GitStatus, IndexStatus, WorktreeStatus
from gitparse.status._parser import parse_status

__all__ = [
    "FileEntry",
    "GitStatus",
    "IndexStatus",
    "WorktreeStatus",
    "parse_status",
]
