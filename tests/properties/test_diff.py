from hypothesis import given, strategies as st

from gitparse.diff import parse_diff, parse_numstat

counts = st.integers(min_value=0, max_value=10_000)
paths = st.from_regex(r"[a-z][a-z0-9_/]{0,20}\.py", fullmatch=True)


@given(rows=st.lists(st.tuples(counts, counts, paths), max_size=25))
def test_numstat_totals_equal_per_file_sums(rows: list[tuple[int, int, str]]) -> None:
    output = "".join(f"{added}\t{deleted}\t{path}\n" for added, deleted, path in rows)

    diff = parse_numstat(output)

    assert diff.stats.files_changed == len(rows)
    assert diff.stats.insertions == sum(r[0] for r in rows)
    assert diff.stats.deletions == sum(r[1] for r in rows)


hunk_lines = st.lists(
    st.tuples(st.sampled_from(" +-"), st.from_regex(r"[a-z ]{0,12}", fullmatch=True)),
    min_size=1,
    max_size=30,
)


@given(lines=hunk_lines)
def test_hunk_counts_match_markers(lines: list[tuple[str, str]]) -> None:
    old_count = sum(1 for marker, _ in lines if marker != "+")
    new_count = sum(1 for marker, _ in lines if marker != "-")
    body = "".join(f"{marker}{text}\n" for marker, text in lines)
    output = f"diff --git a/f.txt b/f.txt\n@@ -1,{old_count} +1,{new_count} @@\n{body}"

    (file,) = parse_diff(output)

    assert file.additions == sum(1 for marker, _ in lines if marker == "+")
    assert file.deletions == sum(1 for marker, _ in lines if marker == "-")
    assert [str(line) for line in file.chunks[0].lines] == [m + t for m, t in lines]
    assert parse_diff(output) == parse_diff(output)
