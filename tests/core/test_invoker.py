"""
Tests for the Conversion Invoker.

Verifies:
1. The configuration and path hint reach the converter untouched.
2. Converter failures surface as ContentConversionError with the original message.
3. Unknown converter names are usage errors.
"""

from unittest.mock import MagicMock

import pytest

from minitest_to_rspec.config import ConversionConfig
from minitest_to_rspec.core.errors import ContentConversionError, UsageError
from minitest_to_rspec.core.invoker import ConversionInvoker
from minitest_to_rspec.core.registry import register_converter
from minitest_to_rspec.enums import FailureKind


def test_passes_text_hint_and_config():
  config = ConversionConfig(use_mocha=True, use_rails=True)
  converter = MagicMock(return_value="converted")
  invoker = ConversionInvoker(config, converter=converter)

  assert invoker.convert("source", "test/a_test.rb") == "converted"
  converter.assert_called_once_with("source", "test/a_test.rb", config)


def test_converter_error_message_passed_through():
  def broken(text, hint, config):
    raise RuntimeError("unexpected token at line 3")

  invoker = ConversionInvoker(ConversionConfig(), converter=broken)
  with pytest.raises(ContentConversionError) as exc:
    invoker.convert("x", "a_test.rb")

  assert str(exc.value) == "unexpected token at line 3"
  assert exc.value.kind is FailureKind.CONTENT_CONVERSION
  assert isinstance(exc.value.__cause__, RuntimeError)


def test_content_conversion_error_propagates_unchanged():
  original = ContentConversionError("a_test.rb:1: nope")

  def rejecting(text, hint, config):
    raise original

  invoker = ConversionInvoker(ConversionConfig(), converter=rejecting)
  with pytest.raises(ContentConversionError) as exc:
    invoker.convert("x", "a_test.rb")
  assert exc.value is original


def test_resolves_registered_converter():
  @register_converter("upper")
  def upper(text, hint, config):
    return text.upper()

  invoker = ConversionInvoker(ConversionConfig(converter="UPPER"))
  assert invoker.convert("it", "a_test.rb") == "IT"


def test_default_converter_is_builtin_minitest():
  invoker = ConversionInvoker(ConversionConfig())
  assert invoker.convert("assert_nil foo\n", "a_test.rb") == "expect(foo).to be_nil\n"


def test_unknown_converter_is_usage_error():
  with pytest.raises(UsageError) as exc:
    ConversionInvoker(ConversionConfig(converter="nope"))
  assert "Unknown converter: 'nope'" in str(exc.value)
  assert "minitest" in str(exc.value)
