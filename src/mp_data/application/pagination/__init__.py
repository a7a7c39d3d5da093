"""Application pagination – page window arithmetic and page results."""
from mp_data.application.pagination.page import Page
from mp_data.application.pagination.page_spec import DEFAULT_PAGE_SIZE, PageSpec

__all__ = ["DEFAULT_PAGE_SIZE", "Page", "PageSpec"]
