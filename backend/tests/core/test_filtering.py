"""Filtering — normalization of search terms into filter keys and the substring predicate.

Tests:
    - None and "" both mean "no filter"
    - Keys are lowercased, whitespace kept; normalization is idempotent
    - Non-string terms are rejected as invalid input
    - Empty key matches everything; otherwise a decimal substring match
"""

import pytest

from sortview.core.errors import InvalidInputError
from sortview.core.filtering import matches_filter, normalize_filter_term


def test_none_normalizes_to_no_filter():
    assert normalize_filter_term(None) == ""


def test_term_is_lowercased_and_whitespace_kept():
    assert normalize_filter_term("AbC") == "abc"
    assert normalize_filter_term(" 2") == " 2"


def test_normalization_is_idempotent():
    key = normalize_filter_term(" 12X ")
    assert normalize_filter_term(key) == key


def test_non_string_term_is_rejected():
    with pytest.raises(InvalidInputError) as exc_info:
        normalize_filter_term(12)
    assert exc_info.value.field == "searchTerm"


def test_empty_key_matches_everything():
    assert matches_filter(1, "")
    assert matches_filter(999_999, "")


def test_substring_match_on_decimal_value():
    assert matches_filter(123, "23")
    assert matches_filter(123, "123")
    assert not matches_filter(123, "32")
    assert not matches_filter(5, "a")
