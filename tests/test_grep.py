"""Tests for the grep tool."""

import os

from textutils import grep

FOX = "The quick\nbrown fox\nthe end\n"


def test_match(run, write_file):
    path = write_file('fox.txt', FOX)
    status, out, err = run(grep.main, 'the', path)
    assert (status, out, err) == (0, "the end\n", "")


def test_insensitive(run, write_file):
    path = write_file('fox.txt', FOX)
    assert run(grep.main, '-i', 'the', path)[1] == "The quick\nthe end\n"


def test_invert_and_count(run, write_file):
    path = write_file('fox.txt', FOX)
    assert run(grep.main, '-v', 'the', path)[1] == "The quick\nbrown fox\n"
    assert run(grep.main, '-c', 'the', path)[1] == "1\n"
    assert run(grep.main, '-c', '-v', '-i', 'the', path)[1] == "1\n"


def test_no_match_exit_status(run, write_file):
    path = write_file('fox.txt', FOX)
    status, out, _ = run(grep.main, 'zebra', path)
    assert status == grep.EX_NOMATCH
    assert out == ""


def test_invalid_pattern(run, write_file):
    path = write_file('fox.txt', FOX)
    status, out, err = run(grep.main, '*', path)
    assert status == grep.EX_FAILURE
    assert err == 'grep: Invalid pattern "*"\n'


def test_several_files_are_prefixed(run, write_file):
    first = write_file('one.txt', "fox\n")
    second = write_file('two.txt', "no\nfox too")
    status, out, _ = run(grep.main, 'fox', first, second)
    assert status == 0
    assert out == f"{first}:fox\n{second}:fox too\n"


def test_directory_needs_recursive(run, tmp_path, write_file):
    path = write_file('fox.txt', FOX)
    status, out, err = run(grep.main, 'end', str(tmp_path), path)
    assert status == grep.EX_FAILURE
    assert err == f"grep: {tmp_path}: Is a directory\n"
    assert out == f"{path}:the end\n"


def test_recursive_walks_in_name_order(run, tmp_path, write_file):
    nested = write_file(os.path.join('a', 'x.txt'), "fox\n")
    top = write_file('b.txt', "fox\n")
    write_file('c.txt', "dog\n")
    status, out, _ = run(grep.main, '-r', 'fox', str(tmp_path))
    assert status == 0
    assert out == f"{nested}:fox\n{top}:fox\n"


def test_recursive_count(run, tmp_path, write_file):
    nested = write_file(os.path.join('a', 'x.txt'), "fox\nfox\n")
    top = write_file('b.txt', "dog\n")
    status, out, _ = run(grep.main, '-rc', 'fox', str(tmp_path))
    assert out == f"{nested}:2\n{top}:0\n"


def test_missing_file(run, tmp_path):
    missing = str(tmp_path / 'missing.txt')
    status, _, err = run(grep.main, 'x', missing)
    assert status == grep.EX_FAILURE
    assert err == f"grep: {missing}: No such file or directory\n"


def test_stdin(run, stdin):
    stdin(FOX)
    assert run(grep.main, 'fox')[1] == "brown fox\n"


def test_recursive_does_not_follow_directory_links(run, tmp_path, write_file):
    found = write_file(os.path.join('d', 'a.txt'), "hit\n")
    top = str(tmp_path / 'd')
    os.symlink(top, os.path.join(top, 'loop'))
    os.symlink(found, os.path.join(top, 'alias'))
    status, out, err = run(grep.main, '-r', 'hit', top)
    assert status == 0
    assert out == f"{found}:hit\n{os.path.join(top, 'alias')}:hit\n"
    assert err == ""
