"""Tests for output mode dispatch."""

import json

from isbnctl.output.formatters import OutputSettings, format_result
from isbnctl.services.isbn import IsbnService
from isbnctl.services.result import ServiceError, ServiceResult


class TestFormatResult:
    def test_json_mode(self) -> None:
        result = IsbnService().hyphenate(["9781408855898"])
        output = format_result(result, settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["data"]["items"][0]["isbn"] == "978-1-4088-5589-8"

    def test_json_wins_over_quiet(self) -> None:
        result = ServiceResult(ok=True, op="validate")
        output = format_result(result, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "validate"

    def test_quiet_hyphenate_prints_bare_isbns(self) -> None:
        result = IsbnService().hyphenate(["1408855895", "0306406152"])
        output = format_result(result, settings=OutputSettings(quiet=True))
        assert output == "978-1-4088-5589-8\n978-0-306-40615-7"

    def test_quiet_error(self) -> None:
        result = ServiceResult(
            ok=False, op="inspect", error=ServiceError(code="INVALID_ISBN", message="bad")
        )
        assert format_result(result, settings=OutputSettings(quiet=True)) == (
            "ERROR: inspect: bad"
        )

    def test_default_settings_render_human(self) -> None:
        result = IsbnService().inspect("9781408855898")
        output = format_result(result)
        assert output.startswith("OK  inspect")
        assert "978-1-4088-5589-8" in output
