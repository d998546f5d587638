"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Global registry and console isolation so tests cannot leak state.
- Helpers to lay out Minitest trees on disk.
"""

import sys
import pytest
from pathlib import Path
from typing import Callable

# Add src to path so we can import 'minitest_to_rspec' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from minitest_to_rspec.core.registry import clear_converters  # noqa: E402
from minitest_to_rspec.utils.console import configure_logging, reset_console  # noqa: E402

SAMPLE_TEST = """\
require 'test_helper'

class BananaTest < Minitest::Test
  def test_peel
    assert_equal :peeled, Banana.new.peel
  end
end
"""


@pytest.fixture(autouse=True)
def isolate_globals():
  """Restores the converter registry and consoles after every test."""
  clear_converters()
  reset_console()
  configure_logging(verbose=False)
  yield
  clear_converters()
  reset_console()
  configure_logging(verbose=False)


@pytest.fixture
def write_file() -> Callable[[Path, str], Path]:
  """Writes `content` to `path`, creating parents. Returns the path."""

  def _write(path: Path, content: str = SAMPLE_TEST) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path

  return _write
