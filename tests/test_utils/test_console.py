"""
Tests for Centralized Logging Utility and Injection Mechanics.

Verifies:
1. Singleton Proxy correctness.
2. Injection capabilities (`set_console`).
3. Progress and error lines are written verbatim to their own channel.
"""

import io
import logging

from rich.console import Console

from minitest_to_rspec.utils.console import (
  configure_logging,
  console,
  err_console,
  get_console,
  get_err_console,
  log_info,
  log_warning,
  print_failure,
  print_progress,
  reset_console,
  set_console,
)


def test_console_singleton_proxy():
  assert callable(console.print)
  assert hasattr(console, "export_text")
  assert isinstance(get_console(), Console)
  assert get_err_console().stderr is True


def test_custom_console_injection():
  out_console = Console(record=True, file=io.StringIO())
  error_console = Console(record=True, file=io.StringIO())
  set_console(out_console, error_console)

  print_progress("test/a_test.rb", "spec/a_spec.rb")
  print_failure("File not found: test/a_test.rb")
  log_warning("Captured Warning")

  assert out_console.export_text() == "Converting test/a_test.rb to spec/a_spec.rb\n"
  captured = error_console.export_text()
  assert "ERROR: Failed to convert: File not found: test/a_test.rb" in captured
  assert "Captured Warning" in captured


def test_single_console_injection_shares_channel():
  shared = Console(record=True, file=io.StringIO())
  set_console(shared)
  assert get_console() is shared
  assert get_err_console() is shared


def test_reset_functionality():
  temp = Console()
  set_console(temp)
  reset_console()
  assert get_console() is not temp
  assert get_err_console() is not temp


def test_lines_are_verbatim(capsys):
  """Brackets, emoji codes and long paths must not be interpreted or wrapped."""
  long_dir = "d" * 150
  print_progress(f"test/[bold]{long_dir}/:smile:_test.rb", "spec/x_spec.rb")
  print_failure("File already exists: spec/[red]x_spec.rb")

  out, err = capsys.readouterr()
  assert out == f"Converting test/[bold]{long_dir}/:smile:_test.rb to spec/x_spec.rb\n"
  assert err == "ERROR: Failed to convert: File already exists: spec/[red]x_spec.rb\n"


def test_verbosity_controls_info(capsys):
  configure_logging(verbose=False)
  log_info("hidden message")
  assert "hidden message" not in capsys.readouterr().err

  configure_logging(verbose=True)
  log_info("shown message")
  assert "shown message" in capsys.readouterr().err
  assert logging.getLogger().level == logging.INFO


def test_configure_logging_does_not_duplicate_handlers():
  from rich.logging import RichHandler

  configure_logging()
  configure_logging()
  handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
  assert len(handlers) == 1
  assert err_console.backend is handlers[0].console
