"""Tests for response schemas."""

from valuation_mcp import SCHEMA_VERSION, SERVER_VERSION
from valuation_mcp.utils.provenance import build_error_response, build_meta, build_provenance


class TestBuildMeta:
    """Tests for build_meta function."""

    def test_meta_has_required_fields(self) -> None:
        """Test meta includes all required fields."""
        meta = build_meta("test_tool")

        assert meta["server_version"] == SERVER_VERSION
        assert meta["schema_version"] == SCHEMA_VERSION
        assert meta["tool"] == "test_tool"

    def test_meta_duration(self) -> None:
        """Test meta includes duration when provided."""
        meta = build_meta("test_tool", duration_ms=123.456)
        assert meta["duration_ms"] == 123.5  # Rounded to 1 decimal

    def test_meta_no_duration(self) -> None:
        """Test meta excludes duration when not provided."""
        assert "duration_ms" not in build_meta("test_tool")


class TestBuildProvenance:
    """Tests for build_provenance function."""

    def test_provenance_has_source_and_warnings(self) -> None:
        prov = build_provenance(source="external_model")
        assert prov["source"] == "external_model"
        assert prov["warnings"] == []

    def test_provenance_as_of(self) -> None:
        prov = build_provenance(source="external_model", as_of="2025-01-30")
        assert prov["as_of"] == "2025-01-30"

    def test_provenance_empty_as_of_omitted(self) -> None:
        prov = build_provenance(source="external_model", as_of="")
        assert "as_of" not in prov

    def test_provenance_kwargs(self) -> None:
        prov = build_provenance(source="external_model", source_count=2, warnings=["w"])
        assert prov["source_count"] == 2
        assert prov["warnings"] == ["w"]


class TestBuildErrorResponse:
    """Tests for build_error_response function."""

    def test_error_response_fields(self) -> None:
        response = build_error_response("invalid_payload", "Invalid JSON payload")
        assert response["error"] is True
        assert response["error_type"] == "invalid_payload"
        assert response["message"] == "Invalid JSON payload"
        assert response["meta"]["tool"] == "error"
        assert "ticker" not in response

    def test_error_response_ticker(self) -> None:
        response = build_error_response("invalid_shape", "bad", ticker="MSFT")
        assert response["ticker"] == "MSFT"
