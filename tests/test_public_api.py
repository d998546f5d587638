"""
Tests for the package-level convenience API.
"""

import pytest

import minitest_to_rspec as mt2r
from minitest_to_rspec.core.errors import ContentConversionError


def test_convert_string():
  assert mt2r.convert("assert_equal 4, 2 + 2") == "expect(2 + 2).to eq(4)"


def test_convert_string_flags():
  code = "require 'test_helper'\nfoo.expects(:bar)\n"
  assert mt2r.convert(code, rails=True, mocha=True) == "require 'rails_helper'\nexpect(foo).to receive(:bar)\n"


def test_convert_string_error_names_source():
  with pytest.raises(ContentConversionError) as exc:
    mt2r.convert("assert_equal 1", source_path="inline.rb")
  assert str(exc.value).startswith("inline.rb:1:")


def test_exports():
  assert mt2r.infer_target("test/a_test.rb") == "spec/a_spec.rb"
  assert mt2r.__version__
