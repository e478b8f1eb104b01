"""
Tests for the game filter module.
"""

from hypothesis import given
from hypothesis import strategies as st

from steamdesk_py.filters import (
    DEFAULT_IGNORED_APP_IDS,
    DEFAULT_SKIP_KEYWORDS,
    Decision,
    FilterPolicy,
    classify,
    split_csv,
)
from steamdesk_py.steam import ManifestRecord


def test_keyword_match_is_case_insensitive() -> None:
    assert classify("My Soundtrack Vol 1", "999", set(), {"Soundtrack"}) is (
        Decision.SUPPRESS
    )
    assert classify("MY SOUNDTRACK", "999", set(), {"soundtrack"}) is (
        Decision.SUPPRESS
    )


def test_default_ignored_id() -> None:
    assert classify("Normal Game", "480", set(), set()) is Decision.SUPPRESS


def test_other_id_accepted() -> None:
    assert classify("Normal Game", "481", set(), set()) is Decision.ACCEPT


def test_id_match_is_exact() -> None:
    assert classify("Normal Game", "4800", {"480"}, {"Nothing"}) is Decision.ACCEPT
    assert classify("Normal Game", "48", {"480"}, {"Nothing"}) is Decision.ACCEPT


def test_default_keywords() -> None:
    assert classify("Proton Experimental", "1493710") is Decision.SUPPRESS
    assert classify("Steam Linux Runtime 3.0 (sniper)", "1628350") is (
        Decision.SUPPRESS
    )
    assert classify("Steamworks Common Redistributables", "228980") is (
        Decision.SUPPRESS
    )
    assert classify("Half-Life 2", "220") is Decision.ACCEPT


def test_override_replaces_defaults() -> None:
    # "Proton" is a default keyword but not in the override
    assert classify("Proton 8.0", "1", {"2"}, {"Demo"}) is Decision.ACCEPT
    assert classify("Cool Demo", "1", {"2"}, {"Demo"}) is Decision.SUPPRESS
    # "480" is ignored by default but not in the override
    assert classify("Spacewar", "480", {"2"}, {"Demo"}) is Decision.ACCEPT


def test_decision_compares_to_string() -> None:
    assert Decision.SUPPRESS == "suppress"
    assert Decision.ACCEPT == "accept"


def test_split_csv() -> None:
    assert split_csv("Proton, Soundtrack ,,Demo") == ["Proton", "Soundtrack", "Demo"]
    assert split_csv("") == []
    assert split_csv(" , ") == []


def test_filter_policy_defaults() -> None:
    policy = FilterPolicy()
    assert policy.ignored_app_ids == DEFAULT_IGNORED_APP_IDS
    assert policy.skip_keywords == DEFAULT_SKIP_KEYWORDS
    # Mutating a policy must not leak into the module defaults
    policy.skip_keywords.append("Extra")
    assert "Extra" not in DEFAULT_SKIP_KEYWORDS


def test_filter_policy_from_csv() -> None:
    policy = FilterPolicy.from_csv(skip_keywords="Demo, Beta", ignored_app_ids="1,2")
    assert policy.skip_keywords == ["Demo", "Beta"]
    assert policy.ignored_app_ids == ["1", "2"]


def test_filter_policy_from_csv_partial() -> None:
    policy = FilterPolicy.from_csv(ignored_app_ids="7")
    assert policy.ignored_app_ids == ["7"]
    assert policy.skip_keywords == DEFAULT_SKIP_KEYWORDS


def test_filter_policy_classify() -> None:
    policy = FilterPolicy()
    assert policy.classify(ManifestRecord("100", "Cool Game")) is Decision.ACCEPT
    assert policy.classify(ManifestRecord("480", "Spacewar")) is Decision.SUPPRESS
    assert policy.classify(ManifestRecord("1", "Game OST Soundtrack")) is (
        Decision.SUPPRESS
    )


@given(name=st.text(max_size=40), app_id=st.from_regex(r"[0-9]{1,8}", fullmatch=True))
def test_ignored_id_always_suppressed(name: str, app_id: str) -> None:
    """An ignored id is suppressed whatever the name."""
    assert classify(name, app_id, {app_id}, {"\x00never"}) is Decision.SUPPRESS


@given(
    prefix=st.text(max_size=10),
    suffix=st.text(max_size=10),
    keyword=st.text(alphabet="abcdefghijklmnopqrstuvwxyz ", min_size=1, max_size=12),
)
def test_keyword_anywhere_in_name_suppressed(
    prefix: str, suffix: str, keyword: str
) -> None:
    """A keyword is matched as a substring regardless of case."""
    name = prefix + keyword.upper() + suffix
    assert classify(name, "1", {"2"}, {keyword}) is Decision.SUPPRESS
