"""
Tests for keyword_csv_converter/handlers.py

Handlers return plain values plus gr.update(...) dicts; only the update
properties the UI relies on are checked.
"""

import io
import json
import logging
import os

import pytest

from keyword_csv_converter.handlers import (
    SAMPLE_DATA,
    convert_handler,
    download_handler,
    load_file_handler,
    load_sample_handler,
)

pytestmark = pytest.mark.usefixtures("fresh_settings")


def test_convert_success_enables_download():
    csv_text, error_update, download_update = convert_handler(SAMPLE_DATA)

    assert csv_text.split("\n") == [
        "kata_pencarian,jumlah_pencarian",
        '"react tutorial",12500',
        '"javascript basics",8900',
        '"web development",15600',
    ]
    assert error_update["visible"] is False
    assert download_update["interactive"] is True


def test_convert_empty_array_disables_download():
    csv_text, error_update, download_update = convert_handler("[]")
    assert csv_text == ""
    assert error_update["visible"] is False
    assert download_update["interactive"] is False


def test_convert_error_clears_output_and_shows_message(caplog):
    with caplog.at_level(logging.WARNING, logger="keyword_csv_converter.handlers"):
        csv_text, error_update, download_update = convert_handler('[{"keyword": "x"}]')

    assert csv_text == ""
    assert error_update["visible"] is True
    assert error_update["value"] == "Item at index 0 missing or invalid 'search_volume' field"
    assert download_update["interactive"] is False
    assert "search_volume" in caplog.text


def test_convert_blank_input():
    _, error_update, _ = convert_handler("   ")
    assert error_update["value"] == "Please enter some data"


def test_download_writes_to_configured_dir(tmp_path):
    csv_text, _, _ = convert_handler(SAMPLE_DATA)
    path, status = download_handler(csv_text, "my keywords")

    assert path == os.path.join(str(tmp_path / "exports"), "my keywords.csv")
    with open(path, encoding="utf-8") as f:
        assert f.read() == csv_text
    assert "Export successful" in status


def test_download_blank_name_uses_default(tmp_path):
    path, _ = download_handler('kata_pencarian,jumlah_pencarian\n"a",1', "  ")
    assert os.path.basename(path) == "keywords.csv"


def test_download_without_csv():
    path, status = download_handler("", "keywords")
    assert path is None
    assert "Nothing to download" in status


def test_download_reports_write_errors(tmp_path):
    blocker = tmp_path / "exports"
    blocker.write_text("not a directory", encoding="utf-8")

    path, status = download_handler('kata_pencarian,jumlah_pencarian\n"a",1', "keywords")
    assert path is None
    assert status.startswith("Error during export:")


def test_load_file_handler_reads_upload():
    content, status = load_file_handler(io.BytesIO(SAMPLE_DATA.encode("utf-8")))
    assert content == SAMPLE_DATA
    assert "File loaded" in status


def test_load_file_handler_without_file():
    update, status = load_file_handler(None)
    assert "value" not in update
    assert status == "No file uploaded."


def test_load_file_handler_missing_path(tmp_path):
    update, status = load_file_handler(str(tmp_path / "missing.json"))
    assert "value" not in update
    assert status.startswith("Error reading file:")


def test_sample_data_is_valid_input():
    assert json.loads(load_sample_handler())[0] == {"keyword": "react tutorial", "search_volume": 12500}


def test_convert_deeply_nested_input_shows_error():
    depth = 50000
    csv_text, error_update, download_update = convert_handler("[" * depth + "]" * depth)

    assert csv_text == ""
    assert error_update["visible"] is True
    assert error_update["value"] == "Input is nested too deeply to parse"
    assert download_update["interactive"] is False


def test_bom_prefixed_upload_converts():
    """Files saved by editors that write a UTF-8 byte order mark still convert."""
    upload = io.BytesIO(b"\xef\xbb\xbf" + SAMPLE_DATA.encode("utf-8"))
    content, _ = load_file_handler(upload)
    csv_text, error_update, _ = convert_handler(content)

    assert error_update["visible"] is False
    assert csv_text.startswith("kata_pencarian,jumlah_pencarian\n")
