"""
Central Logging and Console Utilities.

This module unifies the application's output using the Python standard
`logging` library, backed by `rich` for formatting.

Two output channels exist:

1.  **Progress** (`console`, stdout): one ``Converting <source> to <target>``
    line per file.
2.  **Errors** (`err_console`, stderr): one ``ERROR: Failed to convert: ...``
    line per failure, plus every `logging` record.

Both are Proxy objects around a `rich.console.Console`, so the destination can
be swapped at runtime (e.g. for an in-memory buffer) via `set_console` while
modules keep importing the same stable reference.

Attributes:
    console (_ConsoleProxy): Stable reference to the progress console.
    err_console (_ConsoleProxy): Stable reference to the error console.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

ERROR_PREFIX = "ERROR: Failed to convert: "

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
  }
)


def _make_console(stderr: bool) -> Console:
  return Console(theme=_THEME, stderr=stderr)


class _ConsoleProxy:
  """
  A Proxy wrapper around `rich.console.Console`.

  All printing operations are forwarded to the current backend, which can be
  replaced without invalidating references held by other modules.

  Attributes:
      _backend (Console): The active Rich Console instance.
      _stderr (bool): Whether fresh backends target standard error.
  """

  def __init__(self, stderr: bool = False) -> None:
    self._stderr = stderr
    self._backend: Console = _make_console(stderr)

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console

  def reset(self) -> None:
    """Resets the proxy to a fresh console on its standard stream."""
    self._backend = _make_console(self._stderr)

  @property
  def backend(self) -> Console:
    return self._backend

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def line(self, text: str) -> None:
    """
    Writes `text` verbatim as a single line.

    No markup, highlighting, emoji substitution or wrapping is applied, so
    file paths containing brackets or long names come out untouched.

    Args:
        text (str): The line content, without trailing newline.
    """
    self._backend.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy(stderr=False)
err_console = _ConsoleProxy(stderr=True)


def configure_logging(verbose: bool = False) -> None:
  """
  Configures the root logger to write through the error console.

  Existing RichHandlers are replaced so repeated calls (and console swaps)
  never duplicate output.

  Args:
      verbose (bool): If True, INFO records are shown; otherwise WARNING and above.
  """
  root_logger = logging.getLogger()
  for handler in list(root_logger.handlers):
    if isinstance(handler, RichHandler):
      root_logger.removeHandler(handler)

  rich_handler = RichHandler(
    console=err_console.backend,
    show_time=False,
    omit_repeated_times=False,
    show_path=False,
    markup=True,
    rich_tracebacks=True,
  )
  root_logger.setLevel(logging.INFO if verbose else logging.WARNING)
  root_logger.addHandler(rich_handler)


def set_console(new_console: Console, new_err_console: Optional[Console] = None) -> None:
  """
  Global helper to inject capture consoles.

  Args:
      new_console (Console): Console receiving progress lines.
      new_err_console (Optional[Console]): Console receiving errors and logs.
          Defaults to `new_console`.
  """
  console.set_backend(new_console)
  err_console.set_backend(new_err_console or new_console)
  configure_logging(logging.getLogger().level <= logging.INFO)


def reset_console() -> None:
  """Global helper to reset both consoles to standard output / error."""
  console.reset()
  err_console.reset()
  configure_logging(logging.getLogger().level <= logging.INFO)


def get_console() -> Console:
  return console.backend


def get_err_console() -> Console:
  return err_console.backend


def print_progress(source: Any, target: Any) -> None:
  """Reports that `source` is about to be converted into `target`."""
  console.line(f"Converting {source} to {target}")


def print_failure(reason: str) -> None:
  """Reports one failed conversion on the error channel."""
  err_console.line(f"{ERROR_PREFIX}{reason}")


def log_info(msg: str) -> None:
  """
  Logs an informational message via standard logging.

  Args:
      msg (str): The message content. Can include rich markup like [bold].
  """
  logging.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  logging.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  logging.error(f"❌ {msg}", extra={"markup": True})
