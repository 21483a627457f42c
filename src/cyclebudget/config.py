"""Startup configuration.

Built once at the edge of the application (CLI or embedding code) and passed
down explicitly. Domain code never reads the environment.
"""

import os
from dataclasses import dataclass
from typing import Optional

from cyclebudget.database.namespace import UserNamespace

DEFAULT_APP_ID = "expense-manager-app"
DEFAULT_USER_ID = "local"


@dataclass(frozen=True)
class AppConfig:
    """Store location plus the app/tenant and user the data belongs to."""

    database_path: Optional[str] = None
    app_id: str = DEFAULT_APP_ID
    user_id: str = DEFAULT_USER_ID

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build configuration from CYCLEBUDGET_* environment variables."""
        return cls(
            database_path=os.environ.get("CYCLEBUDGET_DB_PATH") or None,
            app_id=os.environ.get("CYCLEBUDGET_APP_ID") or DEFAULT_APP_ID,
            user_id=os.environ.get("CYCLEBUDGET_USER") or DEFAULT_USER_ID,
        )

    @property
    def namespace(self) -> UserNamespace:
        return UserNamespace(app_id=self.app_id, user_id=self.user_id)
