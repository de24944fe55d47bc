"""Tests for the title filter builder."""

import pytest

from feedproxy.core.constants import FilterMode
from feedproxy.core.exceptions import InvalidFilterSyntax, MissingFilterSpec
from feedproxy.services.predicate_service import (
    RegexPredicate,
    SkipWordsPredicate,
    build_predicate,
    select_filter_mode,
)


class TestRegexPredicate:

    def test_matches_anywhere_in_title(self):
        keep = build_predicate("recall", None)

        assert keep("Beta recall")
        assert keep("recall of Beta")
        assert not keep("Alpha launch")

    def test_anchored_pattern(self):
        keep = build_predicate("^Beta", None)

        assert keep("Beta recall")
        assert not keep("Not Beta")

    def test_empty_pattern_keeps_everything(self):
        keep = build_predicate("", None)

        assert keep.mode is FilterMode.REGEX
        assert keep("anything")
        assert keep("")

    def test_invalid_pattern_raises_client_error(self):
        with pytest.raises(InvalidFilterSyntax) as exc_info:
            build_predicate("(unclosed", None)

        assert exc_info.value.status_code == 400
        assert "(unclosed" in str(exc_info.value)


class TestSkipWordsPredicate:

    def test_drops_exact_token(self):
        keep = build_predicate(None, ["recall"])

        assert not keep("Beta recall")
        assert keep("Alpha launch")

    def test_case_sensitive(self):
        keep = build_predicate(None, ["recall"])

        assert keep("Beta Recall")

    def test_no_substring_matching(self):
        keep = build_predicate(None, ["call"])

        assert keep("Beta recall")
        assert keep("recall, again")

    def test_splits_on_any_whitespace(self):
        keep = SkipWordsPredicate(["recall"])

        assert not keep("Beta\trecall")
        assert not keep("  recall\n")

    def test_multiple_skip_words(self):
        keep = build_predicate(None, ["recall", "update"])

        titles = ["Alpha launch", "Beta recall", "Gamma update"]
        assert [title for title in titles if keep(title)] == ["Alpha launch"]

    def test_blank_skip_word_keeps_everything(self):
        keep = build_predicate(None, [""])

        assert keep.mode is FilterMode.SKIP
        assert keep("Beta recall")
        assert keep("")


class TestFilterModeSelection:

    def test_regex_takes_precedence_over_skip(self):
        keep = build_predicate("^Alpha", ["launch"])

        assert isinstance(keep, RegexPredicate)
        assert keep("Alpha launch")

    def test_select_mode(self):
        assert select_filter_mode("x", None) is FilterMode.REGEX
        assert select_filter_mode("x", ["y"]) is FilterMode.REGEX
        assert select_filter_mode(None, ["y"]) is FilterMode.SKIP

    @pytest.mark.parametrize("skip_words", [None, []])
    def test_missing_filter(self, skip_words):
        with pytest.raises(MissingFilterSpec) as exc_info:
            build_predicate(None, skip_words)

        assert exc_info.value.status_code == 400
        message = str(exc_info.value)
        assert "skip" in message and "re" in message
