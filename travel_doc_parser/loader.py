from typing import Optional, Tuple
import os
from pdfminer.high_level import extract_text
from pdfminer.pdfparser import PDFSyntaxError

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".tif", ".tiff", ".bmp"}
TEXT_EXTENSIONS = {".txt", ".text"}

def _join_err(err: Optional[str], new: str) -> str:
    return f"{err} | {new}" if err else new

def _ocr_pdf(path: str, lang: str) -> str:
    # render pages with pdf2image and pass to pytesseract
    from pdf2image import convert_from_path
    import pytesseract
    pages = convert_from_path(path)
    return "\n".join(pytesseract.image_to_string(img, lang=lang) for img in pages)

def _ocr_image(path: str, lang: str) -> str:
    from PIL import Image
    import pytesseract
    with Image.open(path) as img:
        return pytesseract.image_to_string(img, lang=lang)

def load_document_text(path: str, ocr: bool = False, lang: str = "eng") -> Tuple[str, Optional[str]]:
    """
    Return (text, error) for a travel document.

    PDFs go through pdfminer; if that yields nothing and ocr=True the pages
    are OCR'd. Images are always OCR'd. Plain text files are read as UTF-8.
    """
    err = None
    text = ""
    ext = os.path.splitext(path)[1].lower()

    if ext in TEXT_EXTENSIONS:
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                text = f.read()
        except OSError as e:
            err = f"read_error: {e}"
        return text, err

    if ext in IMAGE_EXTENSIONS:
        try:
            text = _ocr_image(path, lang)
        except Exception as e:
            err = f"ocr_error: {e}"
        return text, err

    if ext != ".pdf":
        return "", f"unsupported_file_type: {ext or 'none'}"

    try:
        text = extract_text(path) or ""
    except PDFSyntaxError as e:
        err = f"PDFSyntaxError: {e}"
    except Exception as e:
        err = f"pdfminer_error: {e}"

    if (not text.strip()) and ocr:
        try:
            text = _ocr_pdf(path, lang)
        except Exception as e:
            err = _join_err(err, f"ocr_error: {e}")
    return text, err
