"""In-memory property listing data layer with simulated API latency"""

from estate_browser.container import ServiceContainer
from estate_browser.core.exceptions import EstateBrowserError, NotFoundError

__all__ = ["ServiceContainer", "EstateBrowserError", "NotFoundError"]

__version__ = "1.0.0"
