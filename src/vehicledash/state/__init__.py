"""State/store layer.

This package holds the dashboard's local view state. The only way
remote data enters it is a wholesale replacement after a full fetch.
"""

from vehicledash.state.store import ViewStateStore

__all__ = ["ViewStateStore"]
