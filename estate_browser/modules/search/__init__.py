# Property filtering shared by the search service and the filter bar

from .filters import apply_search_filters, filter_properties, matches_filter_state

__all__ = ["apply_search_filters", "filter_properties", "matches_filter_state"]
