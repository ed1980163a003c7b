"""
Pure predicate composition over property collections.

``apply_search_filters`` backs ``PropertyService.search_properties``;
``filter_properties`` is the interactive filter bar, which holds its inputs as
raw strings and may be re-run on every keystroke. Neither touches the store.
"""
import math
from typing import Any, Iterable, List, Mapping, Optional, Union

from estate_browser.models.property import Property
from estate_browser.models.search import FilterState, SearchFilters

ALL_TYPES = "all"


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle in (haystack or "").lower()


def apply_search_filters(properties: Iterable[Property], filters: SearchFilters) -> List[Property]:
    """Narrow ``properties`` by every filter that is not None"""
    filtered = list(properties)
    
    if filters.location is not None:
        location = filters.location.lower()
        filtered = [
            p for p in filtered
            if _contains(p.address.city, location) or _contains(p.address.state, location)
        ]
    
    if filters.min_price is not None:
        filtered = [p for p in filtered if p.price >= filters.min_price]
    
    if filters.max_price is not None:
        filtered = [p for p in filtered if p.price <= filters.max_price]
    
    if filters.property_type is not None:
        filtered = [p for p in filtered if p.type == filters.property_type]
    
    if filters.listing_type is not None:
        filtered = [p for p in filtered if p.listing_type == filters.listing_type]
    
    if filters.bedrooms is not None:
        filtered = [p for p in filtered if p.bedrooms >= filters.bedrooms]
    
    return filtered


def parse_price_bound(value: Union[str, float, None]) -> Optional[float]:
    """Numeric value of a price input, or None when it should not constrain.

    Text must be a complete number literal as ``float`` reads it: ``"1500.5"``
    and ``"1e5"`` are bounds, while trailing junk such as ``"150000abc"``
    makes the bound inactive rather than being cut at the first non-digit.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        bound = float(value)
    else:
        text = (value or "").strip()
        if not text:
            return None
        try:
            bound = float(text)
        except ValueError:
            return None
    if math.isnan(bound):
        return None
    return bound


def matches_filter_state(prop: Property, state: FilterState) -> bool:
    term = state.search_term.lower()
    matches_search = (
        term == ""
        or _contains(prop.title, term)
        or _contains(prop.address.city, term)
        or _contains(prop.address.state, term)
    )
    
    matches_type = state.property_type == ALL_TYPES or prop.type.value == state.property_type
    
    min_price = parse_price_bound(state.min_price)
    max_price = parse_price_bound(state.max_price)
    matches_price = (
        (min_price is None or prop.price >= min_price)
        and (max_price is None or prop.price <= max_price)
    )
    
    return matches_search and matches_type and matches_price


def filter_properties(properties: Iterable[Property],
                      state: Union[FilterState, Mapping[str, Any], None] = None) -> List[Property]:
    """Apply the filter bar state to a property collection, keeping order"""
    if state is None:
        state = FilterState()
    elif not isinstance(state, FilterState):
        state = FilterState.model_validate(state)
    return [p for p in properties if matches_filter_state(p, state)]
