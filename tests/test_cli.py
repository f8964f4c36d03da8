import csv
import json
from click.testing import CliRunner
from travel_doc_parser.cli import main

def _json_lines(output):
    # log records may share the captured stream; results are one JSON object per line
    return [json.loads(l) for l in output.splitlines() if l.startswith("{")]

def test_parse_text(boarding_pass):
    res = CliRunner().invoke(main, ["parse-text", "--text", boarding_pass])
    assert res.exit_code == 0, res.output
    out = _json_lines(res.output)[0]
    assert out["success"] is True
    assert out["data"]["details"] == {"airline": "Thai Airways", "flight_number": "TG315"}
    assert max(out["probabilities"], key=out["probabilities"].get) == "flight"

def test_parse_text_from_stdin(hotel_confirmation):
    res = CliRunner().invoke(main, ["parse-text"], input=hotel_confirmation)
    assert res.exit_code == 0, res.output
    assert _json_lines(res.output)[0]["data"]["type"] == "hotel"

def test_analyze_directory_with_report(tmp_path, boarding_pass, hotel_confirmation):
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / "a_pass.txt").write_text(boarding_pass, encoding="utf-8")
    (docs / "b_hotel.txt").write_text(hotel_confirmation, encoding="utf-8")
    (docs / "notes.md").write_text("ignored", encoding="utf-8")
    report = tmp_path / "out" / "report.csv"

    res = CliRunner().invoke(main, ["analyze", str(docs), "--report", str(report)])
    assert res.exit_code == 0, res.output
    lines = _json_lines(res.output)
    assert [l["data"]["type"] for l in lines] == ["flight", "hotel"]
    assert all(l["path_out"] is None for l in lines)
    assert lines[0]["confidence"] == lines[0]["probabilities"]["flight"]

    with open(report, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["flight_number"] == "TG315"
    assert rows[1]["booking_reference"] == "ABC12345"

def test_analyze_rename(tmp_path, boarding_pass):
    src = tmp_path / "scan.txt"
    src.write_text(boarding_pass, encoding="utf-8")
    dest = tmp_path / "sorted"
    res = CliRunner().invoke(main, ["analyze", str(src), "--rename", "--dest", str(dest)])
    assert res.exit_code == 0, res.output
    out = _json_lines(res.output)[0]
    assert out["path_out"].endswith("Flight_Thai Airways_TG315_Bangkok_2025-06-02.txt")
    assert not src.exists()

def test_analyze_unsupported_file(tmp_path):
    p = tmp_path / "ticket.docx"
    p.write_bytes(b"PK\x03\x04")
    res = CliRunner().invoke(main, ["analyze", str(p)])
    assert res.exit_code == 0, res.output
    out = _json_lines(res.output)[0]
    assert out["success"] is False
    assert out["errors"] == "unsupported_file_type: .docx"
