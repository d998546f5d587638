"""
Exception hierarchy for the conversion pipeline.

Every per-item failure is a `ConversionFailure` tagged with a `FailureKind`,
so the orchestrator can turn it into an explicit outcome without inspecting
message text.
"""

from minitest_to_rspec.enums import FailureKind


class MinitestToRspecError(Exception):
  """Base class for all errors raised by this package."""

  kind: FailureKind = FailureKind.USAGE


class UsageError(MinitestToRspecError):
  """Malformed invocation: wrong arguments or unknown converter."""

  kind = FailureKind.USAGE


class ConversionFailure(MinitestToRspecError):
  """
  A failure scoped to a single WorkItem.

  Fatal in single-file mode, recorded and skipped in directory mode.
  """


class SourceNotFoundError(ConversionFailure):
  kind = FailureKind.SOURCE_NOT_FOUND


class TargetAlreadyExistsError(ConversionFailure):
  kind = FailureKind.TARGET_ALREADY_EXISTS


class TargetDirUncreatableError(ConversionFailure):
  kind = FailureKind.TARGET_DIR_UNCREATABLE


class ContentConversionError(ConversionFailure):
  """Raised when a converter rejects or cannot process the input text."""

  kind = FailureKind.CONTENT_CONVERSION
