from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple
import regex as re
from .models import DocumentDetails

# =========================
# Constants & small helpers
# =========================

# ASCII classes: Thai digits and accented letters are neither date digits nor word characters
DATE_RE = re.compile(r"\b(\d{1,2})[/\-.](\d{1,2})[/\-.](\d{2,4})\b", flags=re.ASCII)
FLIGHT_NUMBER_RE = re.compile(r"\b([a-z]{2,3})\s*(\d{1,4})\b", flags=re.IGNORECASE | re.ASCII)
# longer labels come before their prefixes so "reference: X" does not capture "erence"
BOOKING_REF_RE = re.compile(
    r"\b(confirmation|reservation|reference|booking|number|ref):?\s*([a-z0-9]{5,10})\b",
    flags=re.IGNORECASE | re.ASCII,
)

DEFAULT_TRIP_DAYS = 7
UNKNOWN_DESTINATION = "Unknown"

def title_case(s: str) -> str:
    """Uppercase the first letter of every word: 'rio de janeiro' -> 'Rio De Janeiro'."""
    return " ".join(w[:1].upper() + w[1:] for w in s.split())

def _first_listed(normalized_text: str, names: Sequence[str]) -> Optional[str]:
    # list order decides, not position in the text
    for name in names:
        if name in normalized_text:
            return title_case(name)
    return None

# =====
# Dates
# =====

def _to_iso(day: int, month: int, year: int) -> str:
    if year < 100:
        year += 2000
    if month > 12:
        day, month = month, day
    return f"{year}-{month:02d}-{day:02d}"

def extract_dates(normalized_text: str) -> List[str]:
    """
    All D/M/Y-looking dates (separators / - .) as sorted YYYY-MM-DD strings.
    Day and month are swapped when the month slot holds a value above 12.
    No calendar validation: 31/02/2025 comes back as 2025-02-31.
    """
    dates = [
        _to_iso(int(m.group(1)), int(m.group(2)), int(m.group(3)))
        for m in DATE_RE.finditer(normalized_text)
    ]
    dates.sort()
    return dates

def date_range(dates: Sequence[str], today: Optional[date] = None) -> Tuple[str, str]:
    today = today or date.today()
    start = dates[0] if len(dates) > 0 else today.isoformat()
    end = dates[1] if len(dates) > 1 else (today + timedelta(days=DEFAULT_TRIP_DAYS)).isoformat()
    return start, end

# ===========
# Gazetteers
# ===========

def extract_destination(normalized_text: str, destinations: Sequence[str]) -> str:
    return _first_listed(normalized_text, destinations) or UNKNOWN_DESTINATION

def extract_airline(normalized_text: str, airlines: Sequence[str]) -> Optional[str]:
    return _first_listed(normalized_text, airlines)

# ==============
# Flight details
# ==============

def extract_flight_number(normalized_text: str) -> Optional[str]:
    # "TG 315" / "tg315" -> "TG315"
    m = FLIGHT_NUMBER_RE.search(normalized_text)
    if m:
        return m.group(1).upper() + m.group(2)
    return None

# =============
# Hotel details
# =============

def extract_hotel_name(normalized_text: str, hotel_name_keywords: Sequence[str]) -> Optional[str]:
    """
    First keyword (in list order) found next to another word wins, e.g.
    "grand hotel" or "hilton sukhumvit". The neighbouring word may sit on
    either side.
    """
    for keyword in hotel_name_keywords:
        kw = re.escape(keyword)
        m = re.search(rf"(\w+\s+{kw}|{kw}\s+\w+)", normalized_text, flags=re.IGNORECASE | re.ASCII)
        if m:
            return title_case(m.group(0))
    return None

def extract_booking_reference(normalized_text: str) -> Optional[str]:
    m = BOOKING_REF_RE.search(normalized_text)
    if m:
        return m.group(2).upper()
    return None

# =====
# Title
# =====

def build_title(document_type: str, destination: str, details: DocumentDetails) -> str:
    if document_type == "flight" and details.airline:
        return f"{details.airline} to {destination}"
    if document_type == "hotel" and details.hotel_name:
        return details.hotel_name
    return f"{document_type.capitalize()} - {destination}"
