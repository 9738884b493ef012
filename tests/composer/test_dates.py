"""Tests for send-at normalization."""
from datetime import datetime

import pytest

from src.composer import normalize_send_at


class TestNormalizeSendAt:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_means_now(self, value) -> None:
        assert normalize_send_at(value) is None

    def test_utc_designator(self) -> None:
        assert normalize_send_at("2024-01-01T12:00:00.000Z") == "2024-01-01T12:00:00+00:00"

    def test_explicit_offset_is_kept(self) -> None:
        assert normalize_send_at("2024-06-01T09:30:00-03:00") == "2024-06-01T09:30:00-03:00"

    def test_naive_value_gets_local_offset(self) -> None:
        result = normalize_send_at("2024-01-01T12:00")
        parsed = datetime.fromisoformat(result)
        assert parsed.tzinfo is not None
        assert result.startswith("2024-01-01T12:00:00")

    def test_rfc2822_date(self) -> None:
        assert normalize_send_at("Mon, 01 Jan 2024 12:00:00 GMT") == "2024-01-01T12:00:00+00:00"

    def test_unparseable_is_returned_unchanged(self) -> None:
        assert normalize_send_at(" soon ") == "soon"
