# /tests/test_academic_year_service.py

import json
import logging
from datetime import date

from gradebook.core.logging_config import JSONFormatter
from gradebook.services import academic_year_service


def test_current_academic_year_is_buddhist_era():
    assert academic_year_service.get_current_academic_year(date(2025, 6, 1)) == "2568"


def test_academic_year_options_newest_first():
    options = academic_year_service.get_academic_year_options(date(2025, 6, 1))
    assert options == ["2568", "2567", "2566", "2565", "2564"]


def test_missing_academic_year_resolves_to_current():
    assert academic_year_service.resolve_academic_year("2560") == "2560"
    assert academic_year_service.resolve_academic_year(None) == academic_year_service.get_current_academic_year()


def test_json_formatter_emits_one_line_with_request_id():
    record = logging.LogRecord("gradebook.access", logging.INFO, __file__, 1, "GET %s", ("/",), None)
    record.request_id = "abc123"

    entry = json.loads(JSONFormatter().format(record))

    assert entry["message"] == "GET /"
    assert entry["level"] == "INFO"
    assert entry["request_id"] == "abc123"
