"""
minitest-to-rspec Package.

Converts Minitest test files into RSpec, one file at a time or across a whole
``test/`` tree (``test/fruit/banana_test.rb`` -> ``spec/fruit/banana_spec.rb``).

Usage
-----

Simple String Conversion
^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    import minitest_to_rspec as mt2r
    code = "assert_equal 4, 2 + 2"
    print(mt2r.convert(code))
    # expect(2 + 2).to eq(4)

File and Directory Conversion
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from pathlib import Path
    from minitest_to_rspec import BatchOrchestrator, ConversionConfig

    config = ConversionConfig(use_rails=True)
    report = BatchOrchestrator(config).run(Path("test"))
    for outcome in report.failed:
        print(outcome.kind, outcome.reason)
"""

from minitest_to_rspec.config import ConversionConfig
from minitest_to_rspec.core.batch import BatchOrchestrator
from minitest_to_rspec.core.invoker import ConversionInvoker
from minitest_to_rspec.core.paths import infer_target

__version__ = "0.1.0"


def convert(code: str, rails: bool = False, mocha: bool = False, source_path: str = "(string)") -> str:
  """
  Converts a string of Minitest code to RSpec with the default converter.

  Args:
      code (str): The Minitest source.
      rails (bool): Use Rails conventions (rails_helper, :type metadata).
      mocha (bool): Translate Mocha into rspec-mocks.
      source_path (str): Name used in error messages.

  Returns:
      str: The RSpec source.

  Raises:
      ContentConversionError: If the code cannot be converted.
  """
  config = ConversionConfig(use_rails=rails, use_mocha=mocha)
  return ConversionInvoker(config).convert(code, source_path)


__all__ = [
  "BatchOrchestrator",
  "ConversionConfig",
  "ConversionInvoker",
  "convert",
  "infer_target",
  "__version__",
]
