"""Tests for shared schema building blocks."""

import pytest
from pydantic import ValidationError

from civitai_mcp.models import (
    Invalid,
    Metadata,
    PaginatedList,
    QueryParams,
    Stats,
    Valid,
    validate_metadata,
    validate_stats,
)
from civitai_mcp.domains.tags.models import Tag


class TestStats:
    """Test the Stats entity."""

    def test_every_counter_is_optional(self) -> None:
        """An empty object is a valid Stats block."""
        result = validate_stats({})

        assert isinstance(result, Valid)
        assert result.value.download_count is None
        assert result.value.rating is None

    def test_accepts_camel_case_counters(self) -> None:
        """Upstream camelCase keys map onto snake_case attributes."""
        result = validate_stats({"downloadCount": 10, "heartCount": 3, "rating": 4.5})

        assert isinstance(result, Valid)
        assert result.value.download_count == 10
        assert result.value.heart_count == 3
        assert result.value.rating == 4.5

    def test_integer_rating_is_accepted(self) -> None:
        """A whole-number rating still validates as a float field."""
        result = validate_stats({"rating": 5})

        assert isinstance(result, Valid)
        assert result.value.rating == 5

    def test_string_counter_is_rejected(self) -> None:
        """Numeric strings are not coerced into counters."""
        result = validate_stats({"downloadCount": "10"})

        assert isinstance(result, Invalid)
        assert result.errors[0].location == "downloadCount"

    def test_whole_float_counter_is_an_int(self) -> None:
        result = validate_stats({"downloadCount": 1200.0})

        assert isinstance(result, Valid)
        assert result.value.download_count == 1200
        assert isinstance(result.value.download_count, int)

    def test_fractional_counter_is_rejected(self) -> None:
        assert isinstance(validate_stats({"downloadCount": 10.5}), Invalid)

    def test_to_dict_only_includes_present_fields(self) -> None:
        """Absent counters are not reported back as nulls."""
        stats = Stats.model_validate({"likeCount": 2})

        assert stats.to_dict() == {"likeCount": 2}


class TestMetadata:
    """Test pagination metadata."""

    def test_numeric_cursor_stays_numeric(self) -> None:
        """A numeric cursor keeps its number representation."""
        result = validate_metadata({"nextCursor": 12345})

        assert isinstance(result, Valid)
        assert result.value.next_cursor == 12345
        assert isinstance(result.value.next_cursor, int)

    def test_string_cursor_stays_string(self) -> None:
        """A numeric-looking string cursor is not converted to a number."""
        result = validate_metadata({"nextCursor": "12345"})

        assert isinstance(result, Valid)
        assert result.value.next_cursor == "12345"

    def test_opaque_cursor_is_kept(self) -> None:
        """An opaque cursor string round-trips unchanged."""
        result = validate_metadata({"nextCursor": "3|1717171717"})

        assert isinstance(result, Valid)
        assert result.value.to_dict() == {"nextCursor": "3|1717171717"}

    def test_has_next_page(self) -> None:
        """Next page is signalled by either a next URL or a cursor."""
        assert Metadata.model_validate({"nextPage": "https://x/?page=2"}).has_next_page
        assert Metadata.model_validate({"nextCursor": 5}).has_next_page
        assert not Metadata.model_validate({"currentPage": 1, "totalPages": 1}).has_next_page

    def test_boolean_page_size_is_rejected(self) -> None:
        """Wrong type on a present field is invalid."""
        result = validate_metadata({"pageSize": True})

        assert isinstance(result, Invalid)


class TestPaginatedList:
    """Test generic pages."""

    def test_items_are_validated(self) -> None:
        """Each item is validated against the page's item type."""
        page = PaginatedList[Tag].model_validate(
            {"items": [{"name": "anime", "modelCount": 10}], "metadata": {}}
        )

        assert page.items[0].name == "anime"
        assert page.items[0].model_count == 10

    def test_missing_metadata_is_rejected(self) -> None:
        """A page without metadata fails validation."""
        with pytest.raises(ValidationError):
            PaginatedList[Tag].model_validate({"items": []})

    def test_unknown_keys_are_ignored(self) -> None:
        """Extra keys in the payload do not fail validation."""
        page = PaginatedList[Tag].model_validate(
            {"items": [], "metadata": {}, "somethingNew": {"a": 1}}
        )

        assert page.items == []


class TestQueryParams:
    """Test the parameter bag base."""

    def test_limit_must_be_positive(self) -> None:
        """Zero and negative limits are rejected locally."""
        with pytest.raises(ValidationError):
            QueryParams(limit=0)
        with pytest.raises(ValidationError):
            QueryParams(page=-1)

    def test_no_upper_bound_on_limit(self) -> None:
        """Large limits are left for upstream to judge."""
        assert QueryParams(limit=500).limit == 500

    def test_unknown_parameter_is_rejected(self) -> None:
        """Typos in parameter names fail loudly."""
        with pytest.raises(ValidationError):
            QueryParams(limt=5)

    def test_to_query_drops_unset(self) -> None:
        """Only set parameters are emitted."""
        assert QueryParams(limit=5).to_query() == {"limit": 5}
