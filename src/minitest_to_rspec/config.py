"""
Runtime Configuration Store.

A single immutable `ConversionConfig` is built once per run and handed to the
orchestrator and to every converter call.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "minitest_to_rspec"
DEFAULT_CONVERTER = "minitest"


class ConversionConfig(BaseModel):
  """
  Configuration shared by every conversion of a run.
  """

  model_config = ConfigDict(frozen=True)

  use_mocha: bool = Field(False, description="Translate Mocha expectations into rspec-mocks.")
  use_rails: bool = Field(False, description="Require rails_helper and emit :type metadata.")
  converter: str = Field(DEFAULT_CONVERTER, description="Name of the registered converter to invoke.")
  plugin_paths: Tuple[Path, ...] = Field(default_factory=tuple, description="External directories to scan for converters.")
  fail_on_item_error: bool = Field(
    False,
    description="If True, a directory run exits non-zero when any file failed.",
  )

  @field_validator("converter")
  @classmethod
  def normalize_converter(cls, v: str) -> str:
    """
    Normalizes the converter key.

    Args:
        v (str): Raw converter name.

    Returns:
        str: Lowercase, stripped name.

    Raises:
        ValueError: If the name is empty.
    """
    v_clean = v.lower().strip()
    if not v_clean:
      raise ValueError("Converter name must not be empty.")
    return v_clean

  @classmethod
  def load(
    cls,
    rails: Optional[bool] = None,
    mocha: Optional[bool] = None,
    converter: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "ConversionConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    CLI flags can only switch features on; a missing flag (None or False)
    defers to the TOML value.

    Args:
        rails (Optional[bool]): ``--rails`` flag.
        mocha (Optional[bool]): ``--mocha`` flag.
        converter (Optional[str]): Override for the converter name.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        ConversionConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)

    raw_paths: List[str] = toml_config.get("plugin_paths", [])
    base = toml_dir or Path.cwd()
    plugin_paths = tuple((base / Path(p)).resolve() for p in raw_paths)

    return cls(
      use_rails=bool(rails) or bool(toml_config.get("rails", False)),
      use_mocha=bool(mocha) or bool(toml_config.get("mocha", False)),
      converter=converter or toml_config.get("converter", DEFAULT_CONVERTER),
      plugin_paths=plugin_paths,
      fail_on_item_error=bool(toml_config.get("fail_on_item_error", False)),
    )


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts
  the ``[tool.minitest_to_rspec]`` table.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      return data.get("tool", {}).get(TOOL_SECTION, {}), parent

  return {}, None
