"""
Tests for Target Path Inference.

Verifies:
1. The canonical test/ -> spec/ mapping.
2. The leading segment is only replaced at the start of the path.
3. Irregular paths degrade gracefully instead of failing.
"""

from pathlib import Path

import pytest

from minitest_to_rspec.core.paths import infer_target, is_source_file


def test_infer_canonical_layout():
  assert infer_target("test/fruit/banana_test.rb") == "spec/fruit/banana_spec.rb"


def test_infer_leading_segment_only_at_start():
  """`test` inside the path is not a root segment."""
  assert infer_target("app/test/banana_test.rb") == "app/test/banana_spec.rb"
  assert infer_target("test_test.rb") == "spec_spec.rb"


@pytest.mark.parametrize(
  "source, expected",
  [
    ("lib/banana.rb", "lib/banana.rb"),
    ("test/banana.rb", "spec/banana.rb"),
    ("banana_test.rb", "banana_spec.rb"),
    ("test/banana_test.rb.bak", "spec/banana_test.rb.bak"),
    ("/abs/test/banana_test.rb", "/abs/test/banana_spec.rb"),
  ],
)
def test_infer_partial_matches(source, expected):
  assert infer_target(source) == expected


def test_infer_suffix_dot_is_literal():
  """`_test.rb` must match literally, `_testXrb` is not a test file."""
  assert infer_target("test/a_testXrb") == "spec/a_testXrb"


def test_infer_preserves_path_type():
  result = infer_target(Path("test/fruit/banana_test.rb"))
  assert isinstance(result, Path)
  assert result == Path("spec/fruit/banana_spec.rb")


def test_is_source_file(tmp_path):
  (tmp_path / "a_test.rb").write_text("")
  (tmp_path / "a_spec.rb").write_text("")
  (tmp_path / "dir_test.rb").mkdir()

  assert is_source_file(tmp_path / "a_test.rb")
  assert not is_source_file(tmp_path / "a_spec.rb")
  assert not is_source_file(tmp_path / "dir_test.rb")
