"""Result types produced by the travel document parser."""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Optional

DOCUMENT_TYPES = ("flight", "hotel", "other")


@dataclass(frozen=True)
class DocumentDetails:
    """Type-specific fields; only the ones found in the text are set."""

    flight_number: Optional[str] = None
    airline: Optional[str] = None
    hotel_name: Optional[str] = None
    booking_reference: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class ExtractedDocumentInfo:
    type: str
    title: str
    destination: str
    start_date: str  # YYYY-MM-DD
    end_date: str  # YYYY-MM-DD
    details: DocumentDetails = field(default_factory=DocumentDetails)

    def __post_init__(self):
        if self.type not in DOCUMENT_TYPES:
            raise ValueError(f"Unknown document type: {self.type}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "title": self.title,
            "destination": self.destination,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "details": self.details.to_dict(),
        }


@dataclass(frozen=True)
class ParseResult:
    """Either ``success`` with ``data`` or a failure carrying ``error``, never both."""

    success: bool
    data: Optional[ExtractedDocumentInfo] = None
    error: Optional[str] = None

    def __post_init__(self):
        if self.success and (self.data is None or self.error is not None):
            raise ValueError("A successful result carries data and no error")
        if not self.success and (self.data is not None or not self.error):
            raise ValueError("A failed result carries an error message and no data")

    @classmethod
    def ok(cls, data: ExtractedDocumentInfo) -> "ParseResult":
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "data": self.data.to_dict()}
        return {"success": False, "error": self.error}
