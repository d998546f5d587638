"""
Enumerations for minitest-to-rspec.

This module defines the failure categories a conversion run can end in and
the process exit code each of them maps to.
"""

from enum import Enum


class FailureKind(str, Enum):
  """
  Categorization of everything that can go wrong during a run.

  The value is a stable identifier; `exit_code` is the process status used
  when the failure is fatal to the run (single-file mode).
  """

  USAGE = "usage"
  SOURCE_NOT_FOUND = "source_not_found"
  TARGET_ALREADY_EXISTS = "target_already_exists"
  CONTENT_CONVERSION = "content_conversion"
  TARGET_DIR_UNCREATABLE = "target_dir_uncreatable"

  @property
  def exit_code(self) -> int:
    """
    Process exit status associated with this failure.

    Returns:
        int: A value between 1 and 5.
    """
    return _EXIT_CODES[self]


_EXIT_CODES = {
  FailureKind.USAGE: 1,
  FailureKind.SOURCE_NOT_FOUND: 2,
  FailureKind.TARGET_ALREADY_EXISTS: 3,
  FailureKind.CONTENT_CONVERSION: 4,
  FailureKind.TARGET_DIR_UNCREATABLE: 5,
}
