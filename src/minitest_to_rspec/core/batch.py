"""
Batch Orchestrator.

Turns a source argument into WorkItems and drives each one through the
pipeline:

1. Report progress.
2. `assert_exists(source)`.
3. `assert_absent(target)`.
4. `ensure_directory(target)`.
5. Read the source and convert it.
6. Create the target file.

A failure at any step ends that item only. It is reported on the error
channel and returned as a failed `ConversionOutcome`; the remaining items are
still processed.
"""

from pathlib import Path
from typing import List, Optional

from minitest_to_rspec.config import ConversionConfig
from minitest_to_rspec.core.conversion_result import BatchReport, ConversionOutcome, WorkItem
from minitest_to_rspec.core.errors import (
  ContentConversionError,
  ConversionFailure,
  TargetAlreadyExistsError,
  TargetDirUncreatableError,
)
from minitest_to_rspec.core.guard import assert_absent, assert_exists, ensure_directory
from minitest_to_rspec.core.invoker import ConversionInvoker
from minitest_to_rspec.core.paths import SOURCE_GLOB, infer_target, is_source_file
from minitest_to_rspec.utils.console import print_failure, print_progress


def discover_work_items(root: Path) -> List[WorkItem]:
  """
  Enumerates every Minitest file under `root`, recursively, in sorted order.

  Args:
      root: The source directory.

  Returns:
      List[WorkItem]: One item per ``*_test.rb`` file, targets inferred.
  """
  sources = sorted(p for p in root.glob(SOURCE_GLOB) if is_source_file(p))
  return [WorkItem(source_path=src, target_path=infer_target(src)) for src in sources]


class BatchOrchestrator:
  """
  Runs conversions for a single file or a whole directory tree.

  Attributes:
      config (ConversionConfig): Immutable configuration of the run.
      invoker (ConversionInvoker): The text transformation step.
  """

  def __init__(self, config: ConversionConfig, invoker: Optional[ConversionInvoker] = None):
    self.config = config
    self.invoker = invoker or ConversionInvoker(config)

  def run(self, source: Path, target: Optional[Path] = None) -> BatchReport:
    """
    Converts `source`, which may be a file or a directory.

    Args:
        source: File or directory to convert.
        target: Explicit target for single-file mode. Inferred if None;
            ignored in directory mode.

    Returns:
        BatchReport: One outcome per processed item.
    """
    if source.is_dir():
      items = discover_work_items(source)
    else:
      items = [WorkItem(source_path=source, target_path=target or infer_target(source))]
    return self.run_items(items)

  def run_items(self, items: List[WorkItem]) -> BatchReport:
    """Processes `items` sequentially, in the given order."""
    report = BatchReport()
    for item in items:
      outcome = self.process(item)
      if not outcome.success:
        print_failure(outcome.reason)
      report.outcomes.append(outcome)
    return report

  def process(self, item: WorkItem) -> ConversionOutcome:
    """
    Attempts one WorkItem. Per-item failures are returned, never raised.

    Args:
        item: The source/target pair.

    Returns:
        ConversionOutcome: Success, or the failure kind and its message.
    """
    print_progress(item.source_path, item.target_path)
    try:
      assert_exists(item.source_path)
      assert_absent(item.target_path)
      ensure_directory(item.target_path)
      content = _read_source(item.source_path)
      converted = self.invoker.convert(content, str(item.source_path))
      _write_new_file(item.target_path, converted)
    except ConversionFailure as e:
      return ConversionOutcome.failed(item, e.kind, str(e))
    return ConversionOutcome.ok(item)


def _read_source(path: Path) -> str:
  try:
    return path.read_text(encoding="utf-8")
  except (OSError, UnicodeDecodeError) as e:
    raise ContentConversionError(f"Cannot read source: {path} - {e}") from e


def _write_new_file(path: Path, content: str) -> None:
  """
  Creates `path` with `content`. Fails rather than truncating an existing file.

  The content is encoded before the file is created, and a file whose write
  fails is removed again, so a failed item never leaves a partial target.
  """
  try:
    data = content.encode("utf-8")
  except UnicodeError as e:
    raise ContentConversionError(f"Cannot encode converted content for {path} - {e}") from e

  try:
    f = open(path, "xb")
  except FileExistsError as e:
    # Appeared between the guard check and the write.
    raise TargetAlreadyExistsError(f"File already exists: {path}") from e
  except OSError as e:
    raise TargetDirUncreatableError(f"Cannot write target: {path} - {e}") from e

  try:
    with f:
      f.write(data)
  except OSError as e:
    path.unlink(missing_ok=True)
    raise TargetDirUncreatableError(f"Cannot write target: {path} - {e}") from e
  except BaseException:
    path.unlink(missing_ok=True)
    raise
