"""Exceptions for learning use cases."""

from starlette import status

from flashdeck.exceptions import FlashdeckError


class GeneratedCardsNotSavedError(FlashdeckError):
    """Persisting an AI batch stopped part way; earlier cards stay saved."""

    code = "generated_cards_not_saved"

    def __init__(self, saved: int, total: int) -> None:
        self.saved = saved
        self.total = total
        super().__init__(
            f"Failed to save generated cards ({saved} of {total} saved)",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
