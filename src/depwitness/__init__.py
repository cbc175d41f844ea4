"""depwitness: Pin and verify the content digests of resolved build dependencies."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
