"""Tests for raw input normalization helpers."""
import json
from datetime import datetime, timezone

import pytest

from src.schema import coerce_workflow_vars, parse_send_at, parse_workflow_vars, split_recipients


class TestSplitRecipients:
    def test_commas_and_newlines(self) -> None:
        assert split_recipients("1, 2\n3,,\n\n4") == ["1", "2", "3", "4"]

    def test_empty_text(self) -> None:
        assert split_recipients("") == []
        assert split_recipients(" ,\n ") == []


class TestParseWorkflowVars:
    def test_blank_is_none(self) -> None:
        assert parse_workflow_vars("") is None
        assert parse_workflow_vars("  \n") is None

    def test_returns_parsed_value_without_shape_check(self) -> None:
        assert parse_workflow_vars('{"a": 1}') == {"a": 1}
        assert parse_workflow_vars("[1]") == [1]

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(json.JSONDecodeError):
            parse_workflow_vars("{not json")


class TestCoerceWorkflowVars:
    def test_values_rendered_as_strings(self) -> None:
        result = coerce_workflow_vars({
            "name": "Ada",
            "age": 36,
            "ratio": 1.5,
            "active": False,
            "ref": None,
            "nested": {"k": [1, 2]},
        })
        assert result == {
            "name": "Ada",
            "age": "36",
            "ratio": "1.5",
            "active": "false",
            "ref": "null",
            "nested": '{"k":[1,2]}',
        }

    def test_keys_rendered_as_strings(self) -> None:
        assert coerce_workflow_vars({1: "one"}) == {"1": "one"}


class TestParseSendAt:
    def test_iso_text(self) -> None:
        assert parse_send_at("2024-01-01T12:00:00Z") == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    def test_rfc2822_text(self) -> None:
        assert parse_send_at("Mon, 01 Jan 2024 12:00:00 GMT") == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    @pytest.mark.parametrize("text", ["tomorrow", "2024-13-01", ""])
    def test_unparseable_raises(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_send_at(text)
