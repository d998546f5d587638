"""
Data structures flowing through the conversion pipeline.

- `WorkItem`: one source/target pair queued for conversion.
- `ConversionOutcome`: the explicit result of processing one WorkItem.
- `BatchReport`: every outcome of a run, in processing order.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from minitest_to_rspec.enums import FailureKind


class WorkItem(BaseModel):
  """
  A single file to convert. Immutable once created.
  """

  model_config = ConfigDict(frozen=True)

  source_path: Path = Field(..., description="The Minitest file to read.")
  target_path: Path = Field(..., description="The RSpec file to create.")


class ConversionOutcome(BaseModel):
  """
  Success or failure of one WorkItem.
  """

  model_config = ConfigDict(frozen=True)

  item: WorkItem
  success: bool = Field(True, description="True if the target file was written.")
  kind: Optional[FailureKind] = Field(None, description="Failure category, None on success.")
  reason: str = Field("", description="Human-readable failure message.")

  @classmethod
  def ok(cls, item: WorkItem) -> "ConversionOutcome":
    return cls(item=item)

  @classmethod
  def failed(cls, item: WorkItem, kind: FailureKind, reason: str) -> "ConversionOutcome":
    return cls(item=item, success=False, kind=kind, reason=reason)


class BatchReport(BaseModel):
  """
  Aggregated outcomes of a run.
  """

  outcomes: List[ConversionOutcome] = Field(default_factory=list)

  @property
  def succeeded(self) -> List[ConversionOutcome]:
    return [o for o in self.outcomes if o.success]

  @property
  def failed(self) -> List[ConversionOutcome]:
    return [o for o in self.outcomes if not o.success]

  @property
  def has_failures(self) -> bool:
    """
    Check if any item failed.

    Returns:
        True if one or more outcomes are failures.
    """
    return len(self.failed) > 0

  @property
  def first_failure(self) -> Optional[ConversionOutcome]:
    failures = self.failed
    return failures[0] if failures else None
