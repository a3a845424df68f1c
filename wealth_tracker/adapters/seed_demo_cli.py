"""CLI adapter writing demo monthly states into the finance store."""

from wealth_tracker.application.use_cases.seed_demo_data import (
    SeedDemoDataUseCase,
)
from wealth_tracker.infrastructure.container import build_finance_store
from wealth_tracker.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the demo data use case."""
    logger = get_app_logger()
    store = build_finance_store()
    use_case = SeedDemoDataUseCase(store=store, logger=logger)

    states = use_case.execute()

    print(
        f"Seeded {len(states)} monthly states "
        f"({states[0].month} to {states[-1].month})."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
