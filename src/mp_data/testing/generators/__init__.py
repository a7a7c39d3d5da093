"""Testing generators – property-based strategies."""
from mp_data.testing.generators.strategies import column_orders_strategy, page_spec_strategy

__all__ = ["column_orders_strategy", "page_spec_strategy"]
