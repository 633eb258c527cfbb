"""Tests for autocomplete candidates and filtering."""
from datetime import date

from booknest.suggestions import POPULAR_GENRES, RECENT_YEARS, filter_suggestions, recent_years


def test_filter_is_case_insensitive_substring():
    assert filter_suggestions("fan", POPULAR_GENRES) == ["Fantasy"]
    assert filter_suggestions("FAN", POPULAR_GENRES) == ["Fantasy"]


def test_filter_keeps_candidate_order():
    assert filter_suggestions("fiction", POPULAR_GENRES) == [
        "Fiction", "Science Fiction", "Historical Fiction", "Non-fiction"
    ]


def test_filter_empty_input():
    assert filter_suggestions("", POPULAR_GENRES) == []


def test_filter_no_match():
    assert filter_suggestions("cookbook", POPULAR_GENRES) == []


def test_filter_years_as_strings():
    years = (2026, 2025, 2024, 2019, 2017)
    
    assert filter_suggestions("202", years) == ["2026", "2025", "2024"]
    assert filter_suggestions("7", years) == ["2017"]


def test_recent_years():
    years = recent_years(today=date(2026, 10, 17))
    
    assert years == tuple(range(2026, 2016, -1))


def test_recent_years_at_import():
    assert len(RECENT_YEARS) == 10
    assert list(RECENT_YEARS) == sorted(RECENT_YEARS, reverse=True)


def test_filtering_does_not_mutate_candidates():
    before = tuple(POPULAR_GENRES)
    filter_suggestions("o", POPULAR_GENRES)
    
    assert POPULAR_GENRES == before
