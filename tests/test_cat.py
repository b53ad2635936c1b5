"""Tests for the cat tool."""

from textutils import cat

TEXT = "a\n\n\nb\n"


def test_plain(run, write_file):
    path = write_file('text.txt', TEXT)
    status, out, err = run(cat.main, path)
    assert (status, out, err) == (0, TEXT, "")


def test_squeeze_blank(run, write_file):
    path = write_file('text.txt', TEXT)
    assert run(cat.main, '-s', path)[1] == "a\n\nb\n"


def test_number_all_lines(run, write_file):
    path = write_file('text.txt', TEXT)
    assert run(cat.main, '-n', path)[1] == "     1\ta\n     2\t\n     3\t\n     4\tb\n"


def test_number_nonblank(run, write_file):
    path = write_file('text.txt', TEXT)
    assert run(cat.main, '-b', path)[1] == "     1\ta\n\n\n     2\tb\n"


def test_show_ends(run, write_file):
    path = write_file('text.txt', TEXT)
    assert run(cat.main, '-E', path)[1] == "a$\n$\n$\nb$\n"


def test_number_flags_conflict(run, write_file):
    path = write_file('text.txt', TEXT)
    assert run(cat.main, '-n', '-b', path)[0] == 2


def test_numbering_restarts_for_each_file(run, write_file):
    first = write_file('one.txt', "x\n")
    second = write_file('two.txt', "y\n")
    assert run(cat.main, '-n', first, second)[1] == "     1\tx\n     1\ty\n"


def test_missing_file_continues(run, write_file, tmp_path):
    path = write_file('text.txt', "ok\n")
    missing = str(tmp_path / 'nope.txt')
    status, out, err = run(cat.main, missing, path)
    assert status == 1
    assert out == "ok\n"
    assert err == f"cat: {missing}: No such file or directory\n"


def test_stdin_dash(run, stdin):
    stdin("from stdin")
    assert run(cat.main, '-')[1] == "from stdin\n"
