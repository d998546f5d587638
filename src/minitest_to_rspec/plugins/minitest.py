"""
Built-in converter: Minitest (with optional Mocha) to RSpec.
"""

from minitest_to_rspec.rewriter.engine import convert

CONVERTER_NAME = "minitest"

__all__ = ["CONVERTER_NAME", "convert"]
