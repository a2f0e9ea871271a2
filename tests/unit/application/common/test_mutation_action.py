import pytest

from flashdeck.application.common.action import mutation_action, require_caller
from flashdeck.application.common.result import Failure, Success
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.identity.entities.caller import Caller
from flashdeck.exceptions import (
    AIProviderError,
    DeckQuotaExceededError,
    DescriptionRequiredError,
    ProviderFailureReason,
    UnauthorizedError,
)


class Actions:
    @mutation_action("Failed to do the thing")
    def run(self, outcome: object) -> object:
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @mutation_action("Failed to do the async thing")
    async def run_async(self, outcome: object) -> object:
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class TestMutationAction:
    def test_returns_success(self) -> None:
        result = Actions().run(42)

        assert isinstance(result, Success)
        assert result.unwrap() == 42

    def test_application_error_keeps_flags(self) -> None:
        result = Actions().run(DeckQuotaExceededError(3))

        assert isinstance(result, Failure)
        error = result.unwrap_error()
        assert error.code == "deck_quota_exceeded"
        assert error.status_code == 403
        assert error.upgrade_required is True
        assert not error.requires_description

    def test_description_flag(self) -> None:
        error = Actions().run(DescriptionRequiredError(10)).unwrap_error()

        assert error.requires_description is True
        assert error.status_code == 400

    def test_domain_validation_error(self) -> None:
        error = Actions().run(ValidationError("Name is required", field="name")).unwrap_error()

        assert error.code == "validation_error"
        assert error.message == "Name is required"
        assert error.status_code == 422

    def test_unexpected_error_uses_fallback_message(self) -> None:
        error = Actions().run(KeyError("secret internals")).unwrap_error()

        assert error.code == "internal_error"
        assert error.message == "Failed to do the thing"
        assert "secret" not in error.message

    @pytest.mark.asyncio
    async def test_async_success(self) -> None:
        result = await Actions().run_async("done")

        assert result.unwrap() == "done"

    @pytest.mark.asyncio
    async def test_async_provider_error_carries_reason(self) -> None:
        result = await Actions().run_async(
            AIProviderError(ProviderFailureReason.AUTH, "AI service authentication failed.")
        )

        error = result.unwrap_error()
        assert error.reason == "auth"
        assert error.status_code == 502

    def test_wrapped_name_is_preserved(self) -> None:
        assert Actions.run.__name__ == "run"


class TestRequireCaller:
    def test_returns_caller(self) -> None:
        caller = Caller.create("user-1")

        assert require_caller(caller) is caller

    def test_missing_caller(self) -> None:
        with pytest.raises(UnauthorizedError):
            require_caller(None)


class TestResult:
    def test_map(self) -> None:
        assert Success(2).map(lambda v: v * 3) == Success(6)
        failure = Failure("nope")
        assert failure.map(lambda v: v * 3) is failure

    def test_unwrap_wrong_side(self) -> None:
        with pytest.raises(ValueError):
            Success(1).unwrap_error()
        with pytest.raises(ValueError):
            Failure("x").unwrap()
