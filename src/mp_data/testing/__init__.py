"""Testing support – fakes and property-based generators."""
from mp_data.testing.fakes import FetchCall, RecordingDataSource
from mp_data.testing.generators import column_orders_strategy, page_spec_strategy

__all__ = ["FetchCall", "RecordingDataSource", "column_orders_strategy", "page_spec_strategy"]
