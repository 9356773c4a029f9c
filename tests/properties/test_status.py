from pathlib import Path

from hypothesis import given, strategies as st

from gitparse.status import IndexStatus, WorktreeStatus, parse_status

# Codes outside "??" and "!!" whose worktree side never forces the index.
tracked_codes = st.tuples(st.sampled_from(" MADRC"), st.sampled_from(" MD")).map(
    "".join
)

plain_paths = st.from_regex(r"[A-Za-z0-9_.][A-Za-z0-9_. /-]{0,30}", fullmatch=True).filter(
    lambda p: not p.endswith(" ")
)


@given(code=tracked_codes, path=plain_paths)
def test_tracked_codes_round_trip(code: str, path: str) -> None:
    (entry,) = parse_status(f"{code} {path}\n")

    assert entry.to_code() == code
    assert entry.path == Path(path)


@given(path=plain_paths, marker=st.sampled_from("?!"))
def test_untracked_and_ignored_have_clean_index(path: str, marker: str) -> None:
    (entry,) = parse_status(f"{marker}{marker} {path}\n")

    assert entry.index_status is IndexStatus.CLEAN
    assert entry.worktree_status is WorktreeStatus.from_char(marker)


@given(lines=st.lists(st.tuples(tracked_codes, plain_paths), max_size=20))
def test_entry_count_and_order_follow_input(lines: list[tuple[str, str]]) -> None:
    output = "".join(f"{code} {path}\n" for code, path in lines)

    status = parse_status(output)

    assert [e.path for e in status] == [Path(path) for _, path in lines]
    assert parse_status(output) == status
