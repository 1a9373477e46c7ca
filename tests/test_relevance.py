from __future__ import annotations

import pytest

from hltvnews.models import HeadlineAnchor
from hltvnews.services.relevance import EXCLUDED_URL_SUFFIXES, EXCLUDED_URL_TERMS, is_relevant

ROSTER = ["s1mple", "electronic"]


@pytest.mark.parametrize("term", EXCLUDED_URL_TERMS)
def test_excluded_terms_reject_even_matching_titles(term: str) -> None:
    anchor = HeadlineAnchor(title="NAVI and s1mple news", href=f"/news/100/{term}-recap")

    assert is_relevant("NAVI", ROSTER, anchor) is False


@pytest.mark.parametrize("suffix", EXCLUDED_URL_SUFFIXES)
def test_excluded_suffixes_reject_even_matching_titles(suffix: str) -> None:
    anchor = HeadlineAnchor(title="NAVI s1mple", href=f"/news/100/major-{suffix}")

    assert is_relevant("NAVI", ROSTER, anchor) is False


def test_suffix_only_matches_at_the_end() -> None:
    anchor = HeadlineAnchor(title="NAVI lineup guided by veterans", href="/news/100/guide-to-navi-form")

    assert is_relevant("NAVI", ROSTER, anchor) is True


def test_member_name_in_title_is_relevant() -> None:
    anchor = HeadlineAnchor(title="s1mple opens up about future", href="/news/100/s1mple-opens-up")

    assert is_relevant("NAVI", ROSTER, anchor) is True


def test_team_name_in_title_is_relevant() -> None:
    anchor = HeadlineAnchor(title="NAVI bootcamp in Belgrade", href="/news/101/navi-bootcamp")

    assert is_relevant("NAVI", ROSTER, anchor) is True


def test_team_name_match_is_case_sensitive() -> None:
    anchor = HeadlineAnchor(title="Navi bootcamp in Belgrade", href="/news/101/navi-bootcamp")

    assert is_relevant("NAVI", ROSTER, anchor) is False


def test_unrelated_title_is_rejected() -> None:
    anchor = HeadlineAnchor(title="FaZe win in Cologne", href="/news/102/faze-win")

    assert is_relevant("NAVI", ROSTER, anchor) is False


@pytest.mark.parametrize(
    "anchor",
    [
        HeadlineAnchor(title=None, href="/news/1/navi"),
        HeadlineAnchor(title="", href="/news/1/navi"),
        HeadlineAnchor(title="NAVI news", href=None),
        HeadlineAnchor(title="NAVI news", href=""),
    ],
)
def test_missing_title_or_href_is_rejected(anchor: HeadlineAnchor) -> None:
    assert is_relevant("NAVI", ROSTER, anchor) is False


def test_missing_roster_entries_are_ignored() -> None:
    anchor = HeadlineAnchor(title="electronic signs extension", href="/news/103/extension")

    assert is_relevant("NAVI", [None, "electronic"], anchor) is True


def test_empty_roster_names_never_match() -> None:
    anchor = HeadlineAnchor(title="FaZe win in Cologne", href="/news/102/faze-win")

    assert is_relevant("NAVI", ["", "s1mple"], anchor) is False
