"""
Tests for the Filesystem Guard.

Verifies:
1. Each check raises its own failure kind with a readable message.
2. `ensure_directory` is idempotent.
3. OS errors during directory creation are wrapped.
"""

import pytest

from minitest_to_rspec.core.errors import (
  ConversionFailure,
  SourceNotFoundError,
  TargetAlreadyExistsError,
  TargetDirUncreatableError,
)
from minitest_to_rspec.core.guard import assert_absent, assert_exists, ensure_directory
from minitest_to_rspec.enums import FailureKind


def test_assert_exists(tmp_path):
  present = tmp_path / "a_test.rb"
  present.write_text("x")
  assert_exists(present)

  missing = tmp_path / "missing_test.rb"
  with pytest.raises(SourceNotFoundError) as exc:
    assert_exists(missing)
  assert str(exc.value) == f"File not found: {missing}"
  assert exc.value.kind is FailureKind.SOURCE_NOT_FOUND


def test_assert_absent(tmp_path):
  assert_absent(tmp_path / "new_spec.rb")

  existing = tmp_path / "old_spec.rb"
  existing.write_text("hand edited")
  with pytest.raises(TargetAlreadyExistsError) as exc:
    assert_absent(existing)
  assert str(exc.value) == f"File already exists: {existing}"
  assert exc.value.kind is FailureKind.TARGET_ALREADY_EXISTS
  assert existing.read_text() == "hand edited"


def test_assert_absent_rejects_directories(tmp_path):
  with pytest.raises(TargetAlreadyExistsError):
    assert_absent(tmp_path)


def test_ensure_directory_creates_ancestors(tmp_path):
  target = tmp_path / "spec" / "fruit" / "deep" / "banana_spec.rb"
  directory = ensure_directory(target)

  assert directory == target.parent
  assert directory.is_dir()
  assert not target.exists()


def test_ensure_directory_idempotent(tmp_path):
  target = tmp_path / "spec" / "banana_spec.rb"
  ensure_directory(target)
  ensure_directory(target)

  assert [p.name for p in tmp_path.iterdir()] == ["spec"]
  assert list((tmp_path / "spec").iterdir()) == []


def test_ensure_directory_wraps_os_error(tmp_path):
  blocker = tmp_path / "spec"
  blocker.write_text("a file where a directory should be")
  target = blocker / "fruit" / "banana_spec.rb"

  with pytest.raises(TargetDirUncreatableError) as exc:
    ensure_directory(target)

  message = str(exc.value)
  assert message.startswith(f"Cannot create target dir: {target.parent} - ")
  assert isinstance(exc.value, ConversionFailure)
  assert exc.value.kind.exit_code == 5
