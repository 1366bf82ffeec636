"""manview - browse installed programs and read annotated man pages."""
from __future__ import annotations

__version__ = "0.1.0"
