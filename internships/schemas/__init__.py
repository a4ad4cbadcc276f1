from __future__ import annotations
from internships.schemas.run import RunSummary

__all__ = ["RunSummary"]
