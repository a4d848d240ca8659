from backend.app.models.schemas import ViewMode


class ViewState:
    """Active view plus the Report search filter. Any view may follow any other."""

    def __init__(self):
        self.mode = ViewMode.REPORT
        self.search_term = ""

    def navigate(self, mode: ViewMode) -> None:
        """Switch views. The search term is kept."""
        self.mode = mode

    def set_search_term(self, term: str) -> None:
        # Searching always happens in the Report view.
        if self.mode != ViewMode.REPORT:
            self.mode = ViewMode.REPORT
        self.search_term = term
