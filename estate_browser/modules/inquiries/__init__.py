from .service import InquiryService

__all__ = ["InquiryService"]
