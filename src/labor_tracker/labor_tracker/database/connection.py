from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlparse

from supabase import Client, create_client


@dataclass
class SupabaseConfig:
    url: str
    key: str
    entries_table: str = "daily_entries"
    categories_table: str = "worker_categories"

    @property
    def host(self) -> str:
        return urlparse(self.url).netloc or self.url


class SupabaseConnection:
    """Singleton-like Supabase client factory.

    Note: We create a fresh client per operation so no auth state leaks
    between supervisors sharing one server process.
    """

    _instance: Optional["SupabaseConnection"] = None

    def __init__(self, config: SupabaseConfig):
        self._config = config

    @property
    def config(self) -> SupabaseConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: SupabaseConfig) -> "SupabaseConnection":
        if cls._instance is None:
            cls._instance = SupabaseConnection(config)
        return cls._instance

    def connect(self) -> Client:
        # Project key, not the signed-in user's token; see README "Table access".
        return create_client(self._config.url, self._config.key)
