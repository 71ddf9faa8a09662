"""Tests for zxcvbn-backed strength scoring."""

from unittest import mock

import pytest

from pwcheck.strength import (
    NO_REASON_TEXT,
    StrengthError,
    StrengthReport,
    score_password,
)


def test_common_password_scores_zero() -> None:
    report = score_password("password")
    assert report.score == 0
    assert report.warning
    assert report.suggestions


def test_random_password_scores_high() -> None:
    report = score_password("qZ8#vL2!mW9$rT4^xK7&")
    assert report.score == 4
    assert report.fraction == 1.0


def test_empty_password_is_error() -> None:
    with pytest.raises(StrengthError):
        score_password("")


def test_user_inputs_penalize() -> None:
    plain = score_password("velociraptor1987")
    penalized = score_password("velociraptor1987", ["velociraptor1987"])
    assert penalized.guesses < plain.guesses


def test_zxcvbn_value_error_becomes_strength_error() -> None:
    with mock.patch("pwcheck.strength.zxcvbn", side_effect=ValueError("Password too long")):
        with pytest.raises(StrengthError, match="too long"):
            score_password("x" * 500)


def test_from_zxcvbn() -> None:
    report = StrengthReport.from_zxcvbn({
        "score": 2,
        "guesses": 12345,
        "feedback": {"warning": "", "suggestions": ["Add another word or two."]},
        "crack_times_display": {"offline_slow_hashing_1e4_per_second": "1 second"},
    })
    assert report.score == 2
    assert report.warning is None
    assert report.suggestions == ["Add another word or two."]
    assert report.crack_time == "1 second"


def test_to_text() -> None:
    report = StrengthReport(score=1, suggestions=["Use a longer password", "Avoid dates"])
    assert report.to_text() == (
        f"Score: 1/4\nReason: {NO_REASON_TEXT}\nSuggestions:\n"
        "Use a longer password\nAvoid dates"
    )
