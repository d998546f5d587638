"""
Target Path Inference.

Maps a Minitest file location onto the parallel RSpec location, e.g.
``test/fruit/banana_test.rb`` -> ``spec/fruit/banana_spec.rb``.
"""

import os
import re
from pathlib import Path
from typing import Union

SOURCE_ROOT = "test"
TARGET_ROOT = "spec"
SOURCE_SUFFIX = "_test.rb"
TARGET_SUFFIX = "_spec.rb"

# Directory-mode discovery pattern, relative to the source root.
SOURCE_GLOB = f"**/*{SOURCE_SUFFIX}"

_LEADING_ROOT = re.compile(rf"\A{SOURCE_ROOT}")
_TRAILING_SUFFIX = re.compile(rf"{re.escape(SOURCE_SUFFIX)}\Z")

PathLike = Union[str, "os.PathLike[str]"]


def infer_target(source: PathLike) -> PathLike:
  """
  Derives the default target path for a source test file.

  Replaces a leading ``test`` with ``spec`` and a trailing ``_test.rb`` with
  ``_spec.rb``. Either substitution is skipped when its pattern does not
  match, so irregular paths still yield a target.

  Args:
      source: The source file path.

  Returns:
      The inferred target, as a `Path` if a `Path` was given, else a string.
  """
  raw = os.fspath(source)
  inferred = _TRAILING_SUFFIX.sub(TARGET_SUFFIX, _LEADING_ROOT.sub(TARGET_ROOT, raw, count=1), count=1)
  if isinstance(source, Path):
    return Path(inferred)
  return inferred


def is_source_file(path: Path) -> bool:
  """True if the file name follows the Minitest naming convention."""
  return path.is_file() and path.name.endswith(SOURCE_SUFFIX)
