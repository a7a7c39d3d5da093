"""Testing fakes – in-memory test doubles."""
from mp_data.testing.fakes.data_source import FetchCall, RecordingDataSource

__all__ = ["FetchCall", "RecordingDataSource"]
