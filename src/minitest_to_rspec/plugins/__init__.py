"""
Plugins Package.

Discovers the built-in converter modules in this package. Each module exposes
a ``CONVERTER_NAME`` string and a ``convert(text, source_path_hint, config)``
function; adding a new file here makes it selectable by name without edits
elsewhere.
"""

import importlib
import pkgutil
from pathlib import Path

_pkg_dir = Path(__file__).parent


def register_builtins() -> None:
  """Registers every converter module shipped in this package."""
  from minitest_to_rspec.core.registry import register_converter

  for _, module_name, _ in pkgutil.iter_modules([str(_pkg_dir)]):
    if module_name.startswith("_"):
      continue
    module = importlib.import_module(f".{module_name}", package=__name__)
    name = getattr(module, "CONVERTER_NAME", None)
    if name:
      register_converter(name)(module.convert)
