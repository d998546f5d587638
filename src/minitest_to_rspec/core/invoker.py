"""
Conversion Invoker.

Binds the run's `ConversionConfig` to the selected converter and normalizes
whatever the converter raises into a `ContentConversionError`. The message is
passed through unmodified; interpreting or recovering from it is not the
orchestrator's business.
"""

from typing import Optional

from minitest_to_rspec.config import ConversionConfig
from minitest_to_rspec.core.errors import ContentConversionError, UsageError
from minitest_to_rspec.core.registry import ConverterFunction, available_converters, get_converter


class ConversionInvoker:
  """
  Wraps a converter callable together with the configuration of the run.

  Attributes:
      config (ConversionConfig): Feature flags handed to every call.
      converter (ConverterFunction): The text transformation capability.
  """

  def __init__(self, config: ConversionConfig, converter: Optional[ConverterFunction] = None):
    """
    Initializes the invoker.

    Args:
        config: The immutable run configuration.
        converter: Explicit converter. If None, `config.converter` is looked
            up in the registry.

    Raises:
        UsageError: If the configured converter name is not registered.
    """
    self.config = config
    if converter is None:
      converter = get_converter(config.converter)
      if converter is None:
        raise UsageError(f"Unknown converter: '{config.converter}'. Available converters: {available_converters()}")
    self.converter = converter

  def convert(self, text: str, source_path_hint: str) -> str:
    """
    Transforms one file's contents.

    Args:
        text: Full Minitest source text.
        source_path_hint: Original file path, for diagnostics only.

    Returns:
        str: The RSpec source text.

    Raises:
        ContentConversionError: If the converter fails for any reason.
    """
    try:
      return self.converter(text, source_path_hint, self.config)
    except ContentConversionError:
      raise
    except Exception as e:
      raise ContentConversionError(str(e)) from e
