"""Error values reported by a run.

Runs never raise out of the executor. A failed run is described by an error
string whose prefix tells the two kinds apart: a ValidationMismatch (the
consumed items do not match the produced ones) or a RunFault (the strategy or
one of its steps raised).
"""

from collections.abc import Iterable
from enum import StrEnum


class ErrorKind(StrEnum):
  VALIDATION_MISMATCH = "ValidationMismatch"
  RUN_FAULT = "RunFault"


def validation_mismatch(produced_ids: Iterable[int], consumed_ids: Iterable[int]) -> str:
  """Build the mismatch text for a run whose consumed ids differ from the produced ones.

  Both id sequences are sorted so that identical mismatches always render
  identical text.

  Args:
      produced_ids: The work item ids of the run.
      consumed_ids: The ids found in the consumed log, duplicates included.

  Returns:
      A multi-line error description.
  """
  produced = ", ".join(str(i) for i in sorted(produced_ids))
  consumed = ", ".join(str(i) for i in sorted(consumed_ids))
  return f"{ErrorKind.VALIDATION_MISMATCH}:\n\tProduced [ {produced} ]\n\tConsumed [ {consumed} ]"


def run_fault(error: BaseException) -> str:
  """Describe an exception that aborted a run."""
  return f"{ErrorKind.RUN_FAULT}: {type(error).__name__}: {error}"


def error_kind(error: str | None) -> ErrorKind | None:
  """Classify an error string produced by this module, or None for a successful run."""
  if not error:
    return None
  for kind in ErrorKind:
    if error.startswith(f"{kind}:"):
      return kind
  raise ValueError(f"Unrecognized run error: {error!r}")
