import os
import re
import logging
from typing import Optional
from .models import ExtractedDocumentInfo

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1F]')
MAX_NAME_LEN = 180

def _clean(part) -> str:
    # filesystem-safe, single-spaced, no leading/trailing dots
    s = _UNSAFE_CHARS.sub("_", str(part or "NA"))
    return " ".join(s.split()).strip(". ")[:MAX_NAME_LEN]

def build_document_filename(info: ExtractedDocumentInfo, ext: str = ".pdf") -> str:
    d = info.details
    if info.type == "flight":
        parts = ["Flight", d.airline, d.flight_number, info.destination, info.start_date]
    elif info.type == "hotel":
        parts = ["Hotel", d.hotel_name, d.booking_reference, info.destination, info.start_date]
    else:
        parts = ["Other", info.destination, info.start_date]
    return _clean("_".join(_clean(p) for p in parts)) + ext

def _free_path(path: str) -> str:
    """``path`` itself, or the first of ``name-1.ext``, ``name-2.ext``... not taken yet."""
    root, ext = os.path.splitext(path)
    candidate, n = path, 0
    while os.path.exists(candidate):
        n += 1
        candidate = f"{root}-{n}{ext}"
    return candidate

def maybe_rename(path_in: str, dest_dir: Optional[str], new_name: str, do_rename: bool = True) -> Optional[str]:
    if not do_rename:
        return None
    dest_dir = dest_dir or os.path.dirname(path_in) or "."
    os.makedirs(dest_dir, exist_ok=True)
    out_path = _free_path(os.path.join(dest_dir, new_name))
    os.rename(path_in, out_path)
    logger.info("Renamed %s -> %s", path_in, out_path)
    return out_path
