"""
pcbench run contexts.

A run context holds the workload of one benchmark run and the log of what
was consumed, and validates that log once the run is over.
"""

from .simple import RunContext
from .types import IRunContext

__all__ = [
  "IRunContext",
  "RunContext",
]
