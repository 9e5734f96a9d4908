"""Domain layer for quarta."""

# Services are resolved lazily so that utils modules can import
# quarta.domain.errors and quarta.domain.entities without a cycle.
_SERVICES = {
    "CSVImportService": "quarta.domain.csv_import",
    "SummaryService": "quarta.domain.summary",
    "MonthlyFlowService": "quarta.domain.monthly_flow",
    "DebtLedgerService": "quarta.domain.debt_ledger",
}


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = list(_SERVICES)
