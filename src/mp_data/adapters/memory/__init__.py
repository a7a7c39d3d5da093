"""Memory adapter – list-backed data source."""
from mp_data.adapters.memory.array import ArrayDataSource

__all__ = ["ArrayDataSource"]
