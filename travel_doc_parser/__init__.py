from .models import DocumentDetails, ExtractedDocumentInfo, ParseResult
from .parser import extract_travel_info, parse_document

__all__ = ["DocumentDetails", "ExtractedDocumentInfo", "ParseResult", "extract_travel_info", "parse_document"]
