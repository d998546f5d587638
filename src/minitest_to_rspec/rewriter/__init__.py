"""
Rewriter Subpackage.

The default text transformation used by the ``minitest`` converter.

Modules:
    - ``engine``: Line-by-line driver (`MinitestConverter`).
    - ``assertions``: Assertion to expectation mappings.
    - ``mocha``: Mocha to rspec-mocks translation.
    - ``args``: Ruby argument list scanning.
"""

from minitest_to_rspec.rewriter.engine import MinitestConverter, convert

__all__ = ["MinitestConverter", "convert"]
