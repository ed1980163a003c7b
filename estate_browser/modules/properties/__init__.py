from .service import PropertyService

__all__ = ["PropertyService"]
