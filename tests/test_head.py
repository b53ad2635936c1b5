"""Tests for the head tool."""

from textutils import head

TWELVE = "".join(f"line {n}\n" for n in range(1, 13))


def test_preprocess_argv():
    assert head.preprocess_argv(['-20', 'file']) == ['-n', '20', 'file']
    assert head.preprocess_argv(['-', '-n', '3']) == ['-', '-n', '3']


def test_default_ten_lines(run, write_file):
    path = write_file('twelve.txt', TWELVE)
    status, out, _ = run(head.main, path)
    assert status == 0
    assert out == "".join(f"line {n}\n" for n in range(1, 11))


def test_line_count(run, write_file):
    path = write_file('twelve.txt', TWELVE)
    assert run(head.main, '-n', '2', path)[1] == "line 1\nline 2\n"
    assert run(head.main, '-2', path)[1] == "line 1\nline 2\n"


def test_byte_count(run, write_file):
    path = write_file('accent.txt', "ábc\n")
    assert run(head.main, '-c', '3', path)[1] == "áb"
    assert run(head.main, '-c', '1', path)[1] == "�"


def test_keeps_line_endings(run, write_file):
    path = write_file('crlf.txt', "a\r\nb\r\n")
    assert run(head.main, '-n', '1', path)[1] == "a\r\n"


def test_illegal_counts(run, write_file):
    path = write_file('twelve.txt', TWELVE)
    status, _, err = run(head.main, '-n', '0', path)
    assert status == 2
    assert "illegal line count -- 0" in err
    status, _, err = run(head.main, '-c', 'foo', path)
    assert status == 2
    assert "illegal byte count -- foo" in err


def test_lines_and_bytes_conflict(run, write_file):
    path = write_file('twelve.txt', TWELVE)
    assert run(head.main, '-n', '1', '-c', '1', path)[0] == 2


def test_multiple_files_get_headers(run, write_file):
    first = write_file('one.txt', "one\n")
    second = write_file('two.txt', "two\n")
    status, out, _ = run(head.main, first, second)
    assert status == 0
    assert out == f"==> {first} <==\none\n\n==> {second} <==\ntwo\n"


def test_missing_file(run, write_file, tmp_path):
    path = write_file('one.txt', "one\n")
    missing = str(tmp_path / 'missing.txt')
    status, out, err = run(head.main, missing, path)
    assert status == 1
    assert out == f"==> {missing} <==\n\n==> {path} <==\none\n"
    assert "No such file or directory" in err


def test_stdin(run, stdin):
    stdin(TWELVE)
    assert run(head.main, '-n', '1')[1] == "line 1\n"
