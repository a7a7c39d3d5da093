"""Application provider – data-source port, key extraction and the composing DataProvider."""
from mp_data.application.provider.keys import KeySelector, KeySpec
from mp_data.application.provider.port import DataSource, KeyedDataSource
from mp_data.application.provider.provider import DataProvider

__all__ = ["DataProvider", "DataSource", "KeySelector", "KeySpec", "KeyedDataSource"]
