"""
Unit tests for the command line interface.
"""

import io
import json

from mushaf.cli import main


def write_response(tmp_path, response):
    path = tmp_path / "page.json"
    path.write_text(json.dumps(response, ensure_ascii=False), encoding="utf-8")
    return str(path)


class TestCli:
    """Test the mushaf command."""

    def test_text_output(self, tmp_path, capsys, tawbah_page_response):
        path = write_response(tmp_path, tawbah_page_response)

        assert main(["187", path]) == 0

        out = capsys.readouterr().out
        assert "surah_name" in out
        assert "available text lines: 14" in out
        assert "الجزء ١٠" in out

    def test_json_output(self, tmp_path, capsys, maryam_page_response):
        path = write_response(tmp_path, maryam_page_response)

        assert main(["305", path, "--json"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert set(payload) == {"layout", "analysis", "lines", "header"}
        assert payload["layout"]["page_number"] == 305
        assert len(payload["layout"]["slots"]) == 15
        assert payload["analysis"]["available_text_line_count"] == 13
        assert "5" not in payload["lines"]

    def test_reads_stdin(self, monkeypatch, capsys, fatiha_page_response):
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(fatiha_page_response)))

        assert main(["1", "--json"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["analysis"]["structural_slot_numbers"] == []

    def test_invalid_page(self, tmp_path, capsys):
        path = write_response(tmp_path, {"verses": []})

        assert main(["605", path]) == 1
        assert "Invalid page number" in capsys.readouterr().err

    def test_missing_file(self, tmp_path, capsys):
        assert main(["10", str(tmp_path / "missing.json")]) == 1
        assert "error" in capsys.readouterr().err

    def test_bad_json(self, tmp_path, capsys):
        path = tmp_path / "page.json"
        path.write_text("{not json", encoding="utf-8")

        assert main(["10", str(path)]) == 1

    def test_non_object_response(self, tmp_path, capsys):
        path = write_response(tmp_path, [1, 2, 3])

        assert main(["10", path]) == 1
        assert "mapping" in capsys.readouterr().err
