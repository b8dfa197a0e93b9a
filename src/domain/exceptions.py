"""
Domain exceptions raised by use cases and mapped to HTTP errors at the edge.
"""


class DashboardNotFoundError(LookupError):
    def __init__(self, dashboard_id: str) -> None:
        super().__init__(f"Dashboard not found: {dashboard_id!r}")
        self.dashboard_id = dashboard_id


class DuplicateTickerError(ValueError):
    pass


class UserExistsError(ValueError):
    pass


class InvalidCredentialsError(ValueError):
    pass
