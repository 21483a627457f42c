"""Per-user document paths."""

from dataclasses import dataclass

SETTINGS_DOC_ID = "user_settings"


@dataclass(frozen=True)
class UserNamespace:
    """Collection paths for one user of one app.

    The user is always passed explicitly; nothing here looks up a current
    user on its own.
    """

    app_id: str
    user_id: str

    @property
    def root(self) -> str:
        return f"artifacts/{self.app_id}/users/{self.user_id}"

    @property
    def categories(self) -> str:
        return f"{self.root}/categories"

    @property
    def transactions(self) -> str:
        # Income and expense entries share one collection
        return f"{self.root}/expenses"

    @property
    def settings(self) -> str:
        return f"{self.root}/settings"
