"""
CLI Command Handlers Facade.

Re-exports the handlers from `minitest_to_rspec.cli.handlers` so the entry
point (and tests patching it) have a single import location.
"""

from minitest_to_rspec.cli.handlers.convert import _print_batch_summary, handle_convert

__all__ = [
  "_print_batch_summary",
  "handle_convert",
]
