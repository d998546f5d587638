"""
Tests for Ruby argument list scanning.
"""

import pytest

from minitest_to_rspec.rewriter.args import ArgumentSyntaxError, find_closing, scan_line, split_args


def test_split_simple():
  assert split_args(" 1, foo.bar") == (["1", "foo.bar"], "")


def test_split_respects_nesting_and_strings():
  args, comment = split_args('[1, 2], {a: 1, b: 2}, "x, y", call(1, 2)')
  assert args == ["[1, 2]", "{a: 1, b: 2}", '"x, y"', "call(1, 2)"]
  assert comment == ""


def test_split_regex_literal_and_division():
  assert split_args("/a,b/, str") == (["/a,b/", "str"], "")
  assert split_args("total / count, 2") == (["total / count", "2"], "")


def test_split_trailing_comment():
  assert split_args('1, x # "why", not args') == (["1", "x"], '# "why", not args')


def test_split_interpolation_is_inside_string():
  assert split_args('"#{a}, #{b}", c') == (['"#{a}, #{b}"', "c"], "")


def test_split_empty():
  assert split_args("") == ([], "")


@pytest.mark.parametrize("text", ["foo(1, 2", "foo)", '"open', "1,", "[1, 2}"])
def test_split_rejects_malformed(text):
  with pytest.raises(ArgumentSyntaxError):
    split_args(text)


def test_find_closing():
  text = '(a, ")", [b])'
  assert find_closing(text, 0) == len(text) - 1
  with pytest.raises(ArgumentSyntaxError):
    find_closing("(a, b", 0)


def test_scan_line_open_brackets_continue():
  scan = scan_line("(1, [2, # note")
  assert scan.depth == 2
  assert scan.code == "(1, [2,"
  assert scan.comment == "# note"
  assert scan.continues


def test_scan_line_trailing_comma_continues():
  assert scan_line(" 1,").continues
  assert not scan_line(" 1, x").continues
  assert not scan_line(' "a,').continues


def test_scan_line_finds_top_level_modifier():
  assert scan_line(" 1, foo if bar").modifier == 7
  assert scan_line(" x unless y # z").modifier == 2
  assert scan_line(' "a if b", c').modifier == -1
  assert scan_line(" f(a if b)").modifier == -1
  assert scan_line(" {if: 1}").modifier == -1
  assert scan_line(" iffy, x").modifier == -1
