"""
Entry point for module execution (``python -m minitest_to_rspec``).

This module delegates execution to the CLI handler in ``minitest_to_rspec.cli.__main__``.
"""

import sys
from minitest_to_rspec.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
