"""
Tests unitaires pour le parsing des pages JavDB.
"""

from datetime import date

import pytest

from javorg.adapters.api.javdb_parser import (
    parse_date,
    parse_detail,
    parse_score,
    parse_search_results,
)
from javorg.core.exceptions import MetadataServiceError
from tests.fixtures.javdb_responses import (
    JAVDB_DETAIL_PAGE,
    JAVDB_DETAIL_PAGE_ENGLISH,
    JAVDB_DETAIL_PAGE_NO_COVER,
    JAVDB_SEARCH_PAGE,
    JAVDB_SEARCH_PAGE_EMPTY,
    JAVDB_UNEXPECTED_PAGE,
)


class TestParseSearchResults:
    """Tests pour la page de recherche."""

    def test_candidates_in_page_order(self) -> None:
        candidates = parse_search_results(JAVDB_SEARCH_PAGE)

        assert [c.code for c in candidates] == ["MIDA-180", "MIDA-1800"]
        assert candidates[0].path == "/v/abc12"
        assert candidates[0].title == "Premier titre de test"

    def test_empty_page(self) -> None:
        assert parse_search_results(JAVDB_SEARCH_PAGE_EMPTY) == []


class TestParseDetail:
    """Tests pour la page de detail."""

    def test_chinese_labels(self) -> None:
        record = parse_detail(JAVDB_DETAIL_PAGE, "/v/abc12", "https://javdb.com")

        assert record.path == "/v/abc12"
        assert record.code == "MIDA-180"
        assert record.title == "Titre complet de test"
        assert record.pub_date == date(2024, 5, 17)
        assert record.score == 4.5
        assert record.score_count == 10
        assert record.tags == ("單體作品", "美少女")
        assert record.cover_url == "https://c0.jdbstatic.com/covers/ab/abc12.jpg"

    def test_only_female_cast_is_kept(self) -> None:
        record = parse_detail(JAVDB_DETAIL_PAGE, "/v/abc12", "https://javdb.com")
        assert record.cast == ("Actrice Une", "Actrice Trois")

    def test_english_labels_and_relative_cover(self) -> None:
        record = parse_detail(JAVDB_DETAIL_PAGE_ENGLISH, "/v/xyz", "https://javdb.com")

        assert record.code == "ABC-123"
        assert record.pub_date == date(2021, 1, 2)
        assert (record.score, record.score_count) == (3.85, 200)
        assert record.tags == ("Drama",)
        assert record.cast == ("Jane Doe",)
        assert record.cover_url == "https://javdb.com/covers/xy/xyz.jpg"

    def test_missing_fields_use_defaults(self) -> None:
        record = parse_detail(JAVDB_DETAIL_PAGE_NO_COVER, "/v/nc", "https://javdb.com")

        assert record.code == "MIDA-182"
        assert record.cover_url is None
        assert record.pub_date is None
        assert record.tags == ()
        assert record.cast == ()
        assert (record.score, record.score_count) == (0.0, 0)

    def test_unexpected_page_raises(self) -> None:
        with pytest.raises(MetadataServiceError):
            parse_detail(JAVDB_UNEXPECTED_PAGE, "/v/abc12", "https://javdb.com")

    def test_malformed_cover_url_raises(self) -> None:
        html = JAVDB_DETAIL_PAGE.replace(
            "https://c0.jdbstatic.com/covers/ab/abc12.jpg", "http://[bad/x.jpg"
        )

        with pytest.raises(MetadataServiceError, match="/v/abc12"):
            parse_detail(html, "/v/abc12", "https://javdb.com")


class TestFieldParsers:
    """Tests pour les petits parseurs de champs."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("4.5分, 由10人評價", (4.5, 10)),
            ("3.85, by 200 users", (3.85, 200)),
            ("", (0.0, 0)),
        ],
    )
    def test_parse_score(self, text: str, expected: tuple[float, int]) -> None:
        assert parse_score(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [("2024-05-17", date(2024, 5, 17)), ("", None), ("17/05/2024", None)],
    )
    def test_parse_date(self, text: str, expected) -> None:
        assert parse_date(text) == expected
