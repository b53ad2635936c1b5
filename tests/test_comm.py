"""Tests for the comm tool."""

from textutils import comm
from textutils.comm import merge_lines, ONLY_FIRST, ONLY_SECOND, BOTH


def test_merge_lines():
    merged = list(merge_lines(["a", "b", "d"], ["b", "c", "d"]))
    assert merged == [(ONLY_FIRST, "a"), (BOTH, "b"), (ONLY_SECOND, "c"), (BOTH, "d")]


def test_merge_lines_uneven_lengths():
    assert list(merge_lines(["a"], [])) == [(ONLY_FIRST, "a")]
    assert list(merge_lines([], ["a", "b"])) == [(ONLY_SECOND, "a"), (ONLY_SECOND, "b")]


def test_merge_lines_case():
    assert list(merge_lines(["A", "b"], ["a", "B"], insensitive=True)) == [(BOTH, "A"), (BOTH, "b")]
    assert list(merge_lines(["A", "b"], ["a", "B"])) == [
        (ONLY_FIRST, "A"), (ONLY_SECOND, "a"), (ONLY_SECOND, "B"), (ONLY_FIRST, "b"),
    ]


def make_inputs(write_file):
    return write_file('file1.txt', "a\nb\nd\n"), write_file('file2.txt', "b\nc\nd\n")


def test_three_columns(run, write_file):
    file1, file2 = make_inputs(write_file)
    status, out, _ = run(comm.main, file1, file2)
    assert status == 0
    assert out == "a\n\t\tb\n\tc\n\t\td\n"


def test_suppressed_columns(run, write_file):
    file1, file2 = make_inputs(write_file)
    assert run(comm.main, '-1', file1, file2)[1] == "\tb\nc\n\td\n"
    assert run(comm.main, '-1', '-2', file1, file2)[1] == "b\nd\n"
    assert run(comm.main, '-3', file1, file2)[1] == "a\n\tc\n"


def test_output_delimiter(run, write_file):
    file1, file2 = make_inputs(write_file)
    assert run(comm.main, '-d', ':', file1, file2)[1] == "a\n::b\n:c\n::d\n"


def test_one_side_from_stdin(run, write_file, stdin):
    _, file2 = make_inputs(write_file)
    stdin("a\nb\nd\n")
    assert run(comm.main, '-', file2)[1] == "a\n\t\tb\n\tc\n\t\td\n"


def test_both_stdin_is_an_error(run):
    status, out, err = run(comm.main, '-', '-')
    assert status == 1
    assert 'Both input files cannot be STDIN' in err


def test_missing_file_is_fatal(run, write_file, tmp_path):
    file1, _ = make_inputs(write_file)
    missing = str(tmp_path / 'missing.txt')
    status, out, err = run(comm.main, file1, missing)
    assert status == 1
    assert out == ""
    assert err == f"comm: {missing}: No such file or directory\n"
