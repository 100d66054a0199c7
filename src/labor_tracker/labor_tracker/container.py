from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.provider import AuthProvider
from .auth.service import AuthService
from .auth.supabase_auth_provider import SupabaseAuthProvider
from .categories.repository import CategoryRepository
from .categories.service import CategoryService
from .categories.supabase_category_repository import SupabaseCategoryRepository
from .common.actions import ActionTracker
from .costing.calculator.base import CostCalculator
from .costing.calculator.standard_calculator import StandardCostCalculator
from .database.connection import SupabaseConfig, SupabaseConnection
from .entries.repository import EntryRepository
from .entries.service import EntryService
from .entries.supabase_entry_repository import SupabaseEntryRepository
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[SupabaseConnection]

    entries_repo: EntryRepository
    categories_repo: CategoryRepository
    auth_provider: AuthProvider

    calculator: CostCalculator
    actions: ActionTracker

    auth_service: AuthService
    category_service: CategoryService
    entry_service: EntryService
    report_service: ReportService


def assemble(
    *,
    entries_repo: EntryRepository,
    categories_repo: CategoryRepository,
    auth_provider: AuthProvider,
    conn: Optional[SupabaseConnection] = None,
    calculator: Optional[CostCalculator] = None,
) -> Container:
    """Wire services on top of any repository implementations (tests pass fakes)."""
    calculator = calculator or StandardCostCalculator()

    auth_service = AuthService(auth_provider)
    category_service = CategoryService(categories_repo)
    entry_service = EntryService(entries_repo, categories_repo, auth_service, calculator=calculator)
    report_service = ReportService(entries_repo, calculator=calculator)

    return Container(
        conn=conn,
        entries_repo=entries_repo,
        categories_repo=categories_repo,
        auth_provider=auth_provider,
        calculator=calculator,
        actions=ActionTracker(),
        auth_service=auth_service,
        category_service=category_service,
        entry_service=entry_service,
        report_service=report_service,
    )


def build_container(*, supabase_config: dict) -> Container:
    config = SupabaseConfig(
        url=str(supabase_config["url"]),
        key=str(supabase_config["key"]),
        entries_table=str(supabase_config.get("entries_table", "daily_entries")),
        categories_table=str(supabase_config.get("categories_table", "worker_categories")),
    )
    conn = SupabaseConnection.get_instance(config)

    return assemble(
        entries_repo=SupabaseEntryRepository(conn),
        categories_repo=SupabaseCategoryRepository(conn),
        auth_provider=SupabaseAuthProvider(conn),
        conn=conn,
    )
