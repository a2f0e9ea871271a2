"""Names of the views affected by learning mutations."""

DASHBOARD_VIEW = "/dashboard"


def deck_view(deck_id: object) -> str:
    """View name of a deck's detail page."""
    return f"/decks/{deck_id}"
