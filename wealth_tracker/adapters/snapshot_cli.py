"""CLI adapter taking today's valuation snapshot.

Running it from a daily scheduler keeps the net worth history populated
even when the dashboard is not opened.
"""

from wealth_tracker.application.use_cases.ensure_today_snapshot import (
    EnsureTodaySnapshotUseCase,
)
from wealth_tracker.infrastructure.container import build_finance_store
from wealth_tracker.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the snapshot use case."""
    logger = get_app_logger()
    store = build_finance_store()
    use_case = EnsureTodaySnapshotUseCase(store=store, logger=logger)

    snapshot_id = use_case.execute()

    print(f"Today's snapshot: {snapshot_id}")


if __name__ == "__main__":  # pragma: no cover
    main()
