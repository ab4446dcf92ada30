"""CLI adapter to deduplicate or rebuild a fiscal year's summaries.

``LEDGER_RECONCILE_MODE`` selects ``dedupe`` (default) or ``rebuild``.
"""

import os

from src.adapters.recompute_year_cli import _resolve_fiscal_year
from src.infrastructure.container import build_reconcile_year_use_case
from src.infrastructure.logging.logger import get_app_logger

RECONCILE_MODES = ("dedupe", "rebuild")


def main() -> None:
    """Run the reconciliation use case and print the counts."""
    logger = get_app_logger()
    fiscal_year = _resolve_fiscal_year(logger)
    if fiscal_year is None:
        return
    mode = os.getenv("LEDGER_RECONCILE_MODE", "dedupe").strip().lower()
    if mode not in RECONCILE_MODES:
        logger.warning(
            f"Unknown LEDGER_RECONCILE_MODE '{mode}'. "
            f"Expected one of {', '.join(RECONCILE_MODES)}."
        )
        return

    use_case = build_reconcile_year_use_case()
    result = use_case.execute(fiscal_year, rebuild=mode == "rebuild")

    print(
        f"Reconciled {result.fiscal_year} ({mode}): "
        f"kept={result.kept_count}, deleted={result.deleted_count}, "
        f"rekeyed={result.rekeyed_count}, conflicts={len(result.conflicts)}"
    )
    if result.recompute is not None and not result.recompute.ok:
        print(
            f"Rebuild stopped at {result.recompute.failed_month}: "
            f"{result.recompute.error}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
