import os, json, click, csv, logging
from typing import Dict, Any, List, Mapping, Optional
from .rules import load_rules
from .loader import load_document_text, IMAGE_EXTENSIONS, TEXT_EXTENSIONS
from .classifier import probabilities
from .parser import extract_travel_info, parse_loaded_text
from .renamer import build_document_filename, maybe_rename

SUPPORTED_EXTENSIONS = {".pdf"} | IMAGE_EXTENSIONS | TEXT_EXTENSIONS

REPORT_FIELDS = [
    "path_in", "path_out", "success", "type", "title", "destination", "start_date", "end_date",
    "airline", "flight_number", "hotel_name", "booking_reference", "confidence", "error", "errors",
]

logger = logging.getLogger(__name__)

def analyze_file(path: str, rules: Mapping[str, Any], ocr: bool, lang: str, do_rename: bool, dest: Optional[str]) -> Dict[str, Any]:
    text, err = load_document_text(path, ocr=ocr, lang=lang)
    result = parse_loaded_text(text, err, path, rules=rules)
    probs, _, _ = probabilities(text, rules)
    path_out = None

    if result.success:
        new_name = build_document_filename(result.data, ext=os.path.splitext(path)[1] or ".pdf")
        try:
            path_out = maybe_rename(path, dest, new_name, do_rename)
        except OSError as e:
            err = (err + " | " if err else "") + f"rename_error: {e}"

    out = result.to_dict()
    out.update({
        "path_in": path,
        "path_out": path_out,
        "confidence": round(float(probs[result.data.type]), 4) if result.success else None,
        "probabilities": {k: round(float(v), 4) for k, v in probs.items()},
        "errors": err,
    })
    return out

def _collect_files(path: str, recursive: bool) -> List[str]:
    if not os.path.isdir(path):
        return [path]
    files: List[str] = []
    for root, _, names in os.walk(path):
        for n in sorted(names):
            if os.path.splitext(n)[1].lower() in SUPPORTED_EXTENSIONS:
                files.append(os.path.join(root, n))
        if not recursive:
            break
    return files

def _report_row(r: Dict[str, Any]) -> Dict[str, Any]:
    data = r.get("data") or {}
    details = data.get("details") or {}
    row = {k: r.get(k) for k in ("path_in", "path_out", "success", "confidence", "error", "errors")}
    row.update({k: data.get(k) for k in ("type", "title", "destination", "start_date", "end_date")})
    row.update({k: details.get(k) for k in ("airline", "flight_number", "hotel_name", "booking_reference")})
    return row

def write_report(report: str, results: List[Dict[str, Any]]) -> None:
    os.makedirs(os.path.dirname(report) or ".", exist_ok=True)
    with open(report, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for r in results:
            writer.writerow(_report_row(r))

@click.group()
@click.option("--log-level", default="WARNING", show_default=True,
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              envvar="TRAVEL_DOC_PARSER_LOG_LEVEL", help="Logging verbosity (logs go to stderr)")
def main(log_level):
    """Travel document classifier: flights, hotels and where you are going"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

@main.command("analyze")
@click.argument("path", type=click.Path(exists=True))
@click.option("--ocr", is_flag=True, help="OCR scanned PDFs that carry no text layer")
@click.option("--lang", default="eng", help="Tesseract language(s), e.g., 'eng+tha'")
@click.option("--rules", "rules_path", default=None, type=click.Path(exists=True),
              envvar="TRAVEL_DOC_PARSER_RULES", help="Path to a rules YAML (defaults to the packaged one)")
@click.option("--recursive", is_flag=True, help="Recurse into directories")
@click.option("--rename", "do_rename", is_flag=True, help="Rename parsed files after their type, destination and dates")
@click.option("--dest", default=None, type=click.Path(), help="Destination directory for renamed files")
@click.option("--report", default=None, type=click.Path(), help="Optional CSV report path")
def analyze_cmd(path, ocr, lang, rules_path, recursive, do_rename, dest, report):
    """Parse a travel document or a directory of them."""
    rules = load_rules(rules_path)
    results = []
    for f in _collect_files(path, recursive):
        res = analyze_file(f, rules, ocr, lang, do_rename, dest)
        click.echo(json.dumps(res, ensure_ascii=False))
        results.append(res)
    logger.info("Analyzed %d file(s)", len(results))

    if report and results:
        write_report(report, results)

@main.command("parse-text")
@click.option("--text", default=None, help="Document text; read from stdin when omitted")
@click.option("--rules", "rules_path", default=None, type=click.Path(exists=True),
              envvar="TRAVEL_DOC_PARSER_RULES", help="Path to a rules YAML (defaults to the packaged one)")
def parse_text_cmd(text, rules_path):
    """Parse already-extracted document text."""
    if text is None:
        text = click.get_text_stream("stdin").read()
    rules = load_rules(rules_path)
    result = extract_travel_info(text, rules=rules)
    probs, _, _ = probabilities(text, rules)
    out = result.to_dict()
    out["probabilities"] = {k: round(float(v), 4) for k, v in probs.items()}
    click.echo(json.dumps(out, ensure_ascii=False))

if __name__ == "__main__":
    main()
