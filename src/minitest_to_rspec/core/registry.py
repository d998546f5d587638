"""
Converter Registry and Dynamic Plugin Loader.

A converter is any callable ``(text, source_path_hint, config) -> str`` that
rewrites one Minitest file into RSpec. Converters register themselves under a
name with the `register_converter` decorator; the built-in ones live in the
`minitest_to_rspec.plugins` package and extra ones can be loaded from the
directories listed in ``plugin_paths``.
"""

import importlib
import importlib.util
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from minitest_to_rspec.config import ConversionConfig
from minitest_to_rspec.core.errors import UsageError

ConverterFunction = Callable[[str, str, ConversionConfig], str]

_CONVERTERS: Dict[str, ConverterFunction] = {}
_PLUGINS_LOADED = False

logger = logging.getLogger(__name__)


def register_converter(name: str) -> Callable[[ConverterFunction], ConverterFunction]:
  """
  Decorator to register a callable as a named converter.

  Args:
      name: The key users select via ``converter = "<name>"``.
  """

  def decorator(func: ConverterFunction) -> ConverterFunction:
    _CONVERTERS[name.lower().strip()] = func
    return func

  return decorator


def get_converter(name: str) -> Optional[ConverterFunction]:
  """
  Retrieves a registered converter by name.
  Lazily loads the built-in plugins if that has not happened yet.
  """
  if not _PLUGINS_LOADED:
    load_plugins()
  return _CONVERTERS.get(name.lower().strip())


def available_converters() -> List[str]:
  """Sorted names of every registered converter."""
  if not _PLUGINS_LOADED:
    load_plugins()
  return sorted(_CONVERTERS)


def clear_converters() -> None:
  """Resets the internal registry. Primarily for testing."""
  global _PLUGINS_LOADED
  _CONVERTERS.clear()
  _PLUGINS_LOADED = False


def load_plugins(extra_dirs: Optional[Iterable[Path]] = None) -> int:
  """
  Dynamically imports converter plugins.

  Args:
      extra_dirs: Additional directories whose ``*.py`` files are imported
          (user extensions configured via ``plugin_paths``).

  Returns:
      int: Number of external modules loaded.

  Raises:
      UsageError: If a plugin file fails while being imported.
  """
  global _PLUGINS_LOADED
  if not _PLUGINS_LOADED:
    # Imported for its registration side effects.
    import minitest_to_rspec.plugins  # noqa: F401

    # A cleared registry must be refilled even though the package is cached.
    minitest_to_rspec.plugins.register_builtins()
    _PLUGINS_LOADED = True

  total_loaded = 0
  for ex_dir in extra_dirs or ():
    if ex_dir.is_dir():
      total_loaded += _import_from_dir(ex_dir)
    else:
      logger.warning("Plugin directory not found: %s", ex_dir)
  return total_loaded


def _import_from_dir(directory: Path) -> int:
  """Helper to import every python file of a directory by path."""
  count = 0
  for item in sorted(directory.glob("*.py")):
    if item.name == "__init__.py":
      continue
    unique_name = f"minitest_to_rspec_plugin_{item.stem}_{item.stat().st_ino}"
    if unique_name in sys.modules:
      continue
    spec = importlib.util.spec_from_file_location(unique_name, item)
    if spec and spec.loader:
      mod = importlib.util.module_from_spec(spec)
      sys.modules[unique_name] = mod
      try:
        spec.loader.exec_module(mod)
      except Exception as e:
        del sys.modules[unique_name]
        raise UsageError(f"Cannot load converter plugin {item}: {e}") from e
      logger.info("Loaded converter plugin %s", item.name)
      count += 1
  return count
