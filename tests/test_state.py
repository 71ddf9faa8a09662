"""Tests for the interactive checker state machine."""

import pytest

from pwcheck.app.state import (
    CheckDatabase,
    CheckerState,
    PasswordChanged,
    ResultFetched,
)
from pwcheck.hibp.errors import NetworkError
from pwcheck.hibp.models import CheckStatus, PasswordCheckResult
from pwcheck.strength import NO_DATA_TEXT


class TestPasswordChanged:
    """Test password edits."""

    def test_initial_state(self) -> None:
        state = CheckerState()
        assert state.strength is None
        assert state.strength_error == NO_DATA_TEXT
        assert state.breach.status == CheckStatus.NOT_CHECKED

    def test_scores_password(self) -> None:
        state = CheckerState()
        assert state.update(PasswordChanged("password")) is None
        assert state.password == "password"
        assert state.strength is not None
        assert state.strength.score == 0
        assert state.strength_error is None

    def test_empty_password_has_no_data(self) -> None:
        state = CheckerState()
        state.update(PasswordChanged("password"))
        state.update(PasswordChanged(""))
        assert state.strength is None
        assert state.strength_error == NO_DATA_TEXT

    def test_edit_resets_breach_result(self) -> None:
        state = CheckerState()
        state.update(PasswordChanged("password"))
        request = state.update(CheckDatabase())
        state.update(ResultFetched(request.sequence, PasswordCheckResult.found(42)))

        state.update(PasswordChanged("password1"))
        assert state.breach.status == CheckStatus.NOT_CHECKED

    def test_password_not_in_repr(self) -> None:
        state = CheckerState()
        state.update(PasswordChanged("s3cr3t-value"))
        assert "s3cr3t-value" not in repr(state)
        assert "s3cr3t-value" not in repr(PasswordChanged("s3cr3t-value"))


class TestChecks:
    """Test check requests and result publication."""

    def test_check_requests_current_password(self) -> None:
        state = CheckerState()
        state.update(PasswordChanged("hunter2"))
        request = state.update(CheckDatabase())

        assert request is not None
        assert request.password == "hunter2"
        assert request.sequence == state.sequence
        assert state.breach.status == CheckStatus.CHECKING

    def test_result_published(self) -> None:
        state = CheckerState()
        state.update(PasswordChanged("hunter2"))
        request = state.update(CheckDatabase())
        state.update(ResultFetched(request.sequence, PasswordCheckResult.found(17)))

        assert state.breach.occurrences == 17
        assert state.breach.display_text == "Found 17 times"

    def test_error_published(self) -> None:
        state = CheckerState()
        request = state.update(CheckDatabase())
        failed = PasswordCheckResult.from_error(NetworkError("Request failed: offline"))
        state.update(ResultFetched(request.sequence, failed))

        assert state.breach.status == CheckStatus.FAILED
        assert state.breach.display_text == "Request failed: offline"

    def test_superseded_check_is_discarded(self) -> None:
        state = CheckerState()
        state.update(PasswordChanged("hunter2"))
        first = state.update(CheckDatabase())
        second = state.update(CheckDatabase())
        assert second.sequence > first.sequence

        state.update(ResultFetched(second.sequence, PasswordCheckResult.found(5)))
        state.update(ResultFetched(first.sequence, PasswordCheckResult.found(99)))

        assert state.breach.occurrences == 5

    def test_result_for_old_password_is_discarded(self) -> None:
        state = CheckerState()
        state.update(PasswordChanged("hunter2"))
        request = state.update(CheckDatabase())
        state.update(PasswordChanged("hunter3"))

        state.update(ResultFetched(request.sequence, PasswordCheckResult.found(99)))
        assert state.breach.status == CheckStatus.NOT_CHECKED

    def test_unknown_message(self) -> None:
        with pytest.raises(TypeError):
            CheckerState().update("bogus")
