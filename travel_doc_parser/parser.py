"""Turn travel document text into a structured summary."""

import logging
from datetime import date
from typing import Any, Mapping, Optional

from .classifier import classify_type
from .extractors import (
    build_title,
    date_range,
    extract_airline,
    extract_booking_reference,
    extract_dates,
    extract_destination,
    extract_flight_number,
    extract_hotel_name,
)
from .loader import load_document_text
from .models import DocumentDetails, ExtractedDocumentInfo, ParseResult
from .rules import default_rules

logger = logging.getLogger(__name__)

EXTRACTION_FAILED = "Failed to extract travel information from document"
PARSE_FAILED = "Failed to parse document"


def extract_travel_info(
    text: str,
    rules: Optional[Mapping[str, Any]] = None,
    today: Optional[date] = None,
) -> ParseResult:
    """Classify ``text`` and pull out dates, destination and type-specific details.

    Never raises: any error while processing collapses into a failed
    ``ParseResult`` carrying a generic message.

    Args:
        text: Raw text of the document (already extracted/OCR'd).
        rules: Keyword sets and gazetteers; defaults to the packaged rules.
        today: Reference day for the fallback date range; defaults to today.
    """
    try:
        rules = rules or default_rules()
        normalized = text.lower()

        document_type = classify_type(normalized, rules)
        start_date, end_date = date_range(extract_dates(normalized), today=today)
        destination = extract_destination(normalized, rules["destinations"])

        if document_type == "flight":
            details = DocumentDetails(
                airline=extract_airline(normalized, rules["airlines"]),
                flight_number=extract_flight_number(normalized),
            )
        elif document_type == "hotel":
            details = DocumentDetails(
                hotel_name=extract_hotel_name(normalized, rules["hotel_name_keywords"]),
                booking_reference=extract_booking_reference(normalized),
            )
        else:
            details = DocumentDetails()

        info = ExtractedDocumentInfo(
            type=document_type,
            title=build_title(document_type, destination, details),
            destination=destination,
            start_date=start_date,
            end_date=end_date,
            details=details,
        )
    except Exception:
        logger.exception("Error parsing document text")
        return ParseResult.failure(EXTRACTION_FAILED)

    logger.debug("Extracted %s document for %s", info.type, info.destination)
    return ParseResult.ok(info)


def parse_loaded_text(
    text: str,
    err: Optional[str],
    path: str,
    rules: Optional[Mapping[str, Any]] = None,
    today: Optional[date] = None,
) -> ParseResult:
    """Parse text coming from :func:`load_document_text`.

    A loader error only fails the parse when it left no text behind; partial
    text (e.g. pdfminer failed but OCR worked) is still parsed.
    """
    if err:
        logger.warning("Text loading for %s reported: %s", path, err)
        if not text.strip():
            return ParseResult.failure(PARSE_FAILED)
    return extract_travel_info(text, rules=rules, today=today)


def parse_document(
    path: str,
    ocr: bool = False,
    lang: str = "eng",
    rules: Optional[Mapping[str, Any]] = None,
    today: Optional[date] = None,
) -> ParseResult:
    """Load the text of the file at ``path`` and run :func:`extract_travel_info` on it."""
    text, err = load_document_text(path, ocr=ocr, lang=lang)
    return parse_loaded_text(text, err, path, rules=rules, today=today)
