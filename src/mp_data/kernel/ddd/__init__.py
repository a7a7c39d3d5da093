"""Kernel DDD – value object base."""
from mp_data.kernel.ddd.value_object import ValueObject

__all__ = ["ValueObject"]
