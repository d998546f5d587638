"""
Main Entry Point for the mt2rspec CLI.

This module handles argument parsing and dispatches to the convert handler
defined in `minitest_to_rspec.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from minitest_to_rspec import __version__
from minitest_to_rspec.cli import commands
from minitest_to_rspec.enums import FailureKind
from minitest_to_rspec.utils.console import configure_logging, err_console

DESCRIPTION = """\
Reads source_file, writes target_file. If target_file is omitted,
its location will be inferred. For example, test/fruit/banana_test.rb
implies spec/fruit/banana_spec.rb. If the target directory doesn't
exist, it will be created. If source_file is a directory, every
*_test.rb file below it is converted.
"""
OPT_MOCHA = "Convert mocha to rspec-mocks. (Experimental)"
OPT_RAILS = "Requires rails_helper instead of spec_helper. Passes :type metadatum to RSpec.describe."


class _ArgumentParser(argparse.ArgumentParser):
  """ArgumentParser whose usage errors exit with the tool's usage status."""

  def error(self, message: str) -> NoReturn:
    self.print_usage(sys.stderr)
    self.exit(FailureKind.USAGE.exit_code, f"{self.prog}: error: {message}\n")


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, 1-5 for failures).
  """
  parser = _ArgumentParser(
    prog="mt2rspec",
    usage="%(prog)s [--rails] [--mocha] source_file [target_file]",
    description=DESCRIPTION,
    formatter_class=argparse.RawDescriptionHelpFormatter,
  )
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("--rails", action="store_true", help=OPT_RAILS)
  parser.add_argument("--mocha", action="store_true", help=OPT_MOCHA)
  parser.add_argument("-v", "--verbose", action="store_true", help="Show plugin loading and a batch summary.")
  parser.add_argument("source", nargs="?", type=Path, help="Minitest file or directory")
  parser.add_argument("target", nargs="?", type=Path, help="RSpec file to create (file mode only)")

  args = parser.parse_args(argv)
  configure_logging(args.verbose)

  if args.source is None:
    err_console.line("Please specify source file or directory")
    return FailureKind.USAGE.exit_code

  return commands.handle_convert(args.source, args.target, args.rails, args.mocha)


if __name__ == "__main__":
  sys.exit(main())
