"""
Filesystem Guard.

Pre-write checks for a single WorkItem. Each check raises a distinct
`ConversionFailure` subclass with a human-readable message:

- `assert_exists`: the source must be present.
- `assert_absent`: the target must NOT be present. Conversion never
  overwrites an existing file, so hand-edited specs survive repeated runs.
- `ensure_directory`: the target's parent directory is created on demand.
"""

from pathlib import Path

from minitest_to_rspec.core.errors import (
  SourceNotFoundError,
  TargetAlreadyExistsError,
  TargetDirUncreatableError,
)


def assert_exists(path: Path) -> None:
  """
  Raises:
      SourceNotFoundError: If `path` does not exist.
  """
  if not path.exists():
    raise SourceNotFoundError(f"File not found: {path}")


def assert_absent(path: Path) -> None:
  """
  Raises:
      TargetAlreadyExistsError: If `path` exists (file, directory or link).
  """
  if path.exists() or path.is_symlink():
    raise TargetAlreadyExistsError(f"File already exists: {path}")


def ensure_directory(path: Path) -> Path:
  """
  Creates the parent directory of `path` (and any missing ancestors).

  Calling it again for the same path is a no-op.

  Args:
      path: The file whose directory must exist.

  Returns:
      Path: The parent directory.

  Raises:
      TargetDirUncreatableError: If the directory cannot be created. The
          message wraps the underlying OS error.
  """
  directory = path.parent
  if directory.is_dir():
    return directory
  try:
    directory.mkdir(parents=True, exist_ok=True)
  except OSError as e:
    raise TargetDirUncreatableError(f"Cannot create target dir: {directory} - {e}") from e
  return directory
