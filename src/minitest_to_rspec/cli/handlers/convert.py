"""
Convert Command Handler.

This module implements the logic behind ``mt2rspec``. It orchestrates:
1. Configuration loading (pyproject.toml + CLI flags).
2. Converter plugin discovery.
3. The batch run over a file or a directory tree.
4. Mapping of the outcome to a process exit code.
"""

import logging
from pathlib import Path
from typing import Optional

from rich.markup import escape
from rich.table import Table

from minitest_to_rspec.config import ConversionConfig
from minitest_to_rspec.core.batch import BatchOrchestrator
from minitest_to_rspec.core.conversion_result import BatchReport
from minitest_to_rspec.core.errors import UsageError
from minitest_to_rspec.core.invoker import ConversionInvoker
from minitest_to_rspec.core.registry import load_plugins
from minitest_to_rspec.enums import FailureKind
from minitest_to_rspec.utils.console import err_console, log_info, log_success, log_warning


def handle_convert(
  source: Path,
  target: Optional[Path] = None,
  rails: bool = False,
  mocha: bool = False,
) -> int:
  """
  Handles the conversion of a file or a directory.

  Single-file mode: any failure is fatal and mapped to its exit code.
  Directory mode: failures are reported per file and the run exits 0, unless
  ``fail_on_item_error`` is configured.

  Args:
      source: Minitest file or directory containing ``*_test.rb`` files.
      target: Output file (single-file mode only). Inferred if None.
      rails: Enables Rails conventions (``--rails``).
      mocha: Enables Mocha translation (``--mocha``).

  Returns:
      int: Exit code.
  """
  search_path = source if source.is_dir() else source.parent
  try:
    config = ConversionConfig.load(rails=rails, mocha=mocha, search_path=search_path)
    loaded_count = load_plugins(config.plugin_paths)
    if loaded_count > 0:
      log_info(f"Loaded {loaded_count} external converter plugins.")
    invoker = ConversionInvoker(config)
  except UsageError as e:
    err_console.line(str(e))
    return FailureKind.USAGE.exit_code
  except ValueError as e:
    # Malformed pyproject.toml or invalid settings.
    err_console.line(f"Invalid configuration: {e}")
    return FailureKind.USAGE.exit_code

  orchestrator = BatchOrchestrator(config, invoker)

  if source.is_dir():
    if target is not None:
      log_warning(f"Ignoring target {escape(str(target))}: targets are inferred in directory mode.")
    report = orchestrator.run(source)
    _print_batch_summary(report)
    if config.fail_on_item_error and report.has_failures:
      return report.first_failure.kind.exit_code
    return 0

  report = orchestrator.run(source, target)
  outcome = report.outcomes[0]
  if not outcome.success:
    return outcome.kind.exit_code
  return 0


def _print_batch_summary(report: BatchReport) -> None:
  """
  Renders a summary of a directory run. Shown only with ``--verbose``.

  Args:
      report: Outcomes of the run.
  """
  if not logging.getLogger().isEnabledFor(logging.INFO):
    return

  total = len(report.outcomes)
  if not report.has_failures:
    log_success(f"Batch Complete: {total}/{total} files converted.")
    return

  table = Table(title="Conversion Report")
  table.add_column("File", style="cyan")
  table.add_column("Failure", justify="center")
  table.add_column("Reason", style="red")

  for outcome in report.failed:
    table.add_row(escape(str(outcome.item.source_path)), outcome.kind.value, escape(outcome.reason))

  err_console.print(table)
  err_console.print(f"\n[bold]Summary:[/bold] {len(report.succeeded)} Converted, {len(report.failed)} Failed.")
