"""Tests for debt ledger domain service."""

import pytest

from quarta.domain.debt_ledger import DebtLedgerService, debt_direction, is_debt_tag
from quarta.domain.entities import DebtDirection

from conftest import HEADER, SAMPLE_CSV


def _rows(*rows):
    return HEADER + "".join(f"{row}\n" for row in rows)


@pytest.mark.parametrize(
    "tags,expected",
    [
        ("Debt", True),
        ("Debt:In", True),
        ("Debt:Out", True),
        ("Family,Debt:In", True),
        ("Food", False),
        ("debt", False),
        (None, False),
        ("", False),
    ],
)
def test_is_debt_tag(tags, expected):
    assert is_debt_tag(tags) is expected


@pytest.mark.parametrize(
    "tags,expected",
    [
        ("Debt:In", DebtDirection.IN),
        ("Family,Debt:In", DebtDirection.IN),
        ("Debt:Out", DebtDirection.OUT),
        ("Debt", DebtDirection.OUT),
        (None, DebtDirection.OUT),
    ],
)
def test_debt_direction(tags, expected):
    assert debt_direction(tags) is expected


def test_in_debt_partially_repaid(import_service, debt_ledger_service):
    import_service.import_text(
        _rows("2024-01-01,Loan,100,Debt:In,bob,", "2024-02-01,Repay,-40,Debt:In,bob,")
    )

    (entry,) = debt_ledger_service.search_debtors("")

    assert entry.id == "bob"
    assert entry.balance == 60.0
    assert entry.direction == DebtDirection.IN
    assert entry.paid is False


def test_in_debt_fully_repaid(import_service, debt_ledger_service):
    import_service.import_text(
        _rows(
            "2024-01-01,Loan,100,Debt:In,bob,",
            "2024-02-01,Repay,-40,Debt:In,bob,",
            "2024-03-01,Repay,-60,Debt:In,bob,",
        )
    )

    (entry,) = debt_ledger_service.search_debtors("")

    assert entry.balance == 0.0
    assert entry.paid is True


def test_out_debt_paid_when_balance_non_negative(import_service, debt_ledger_service):
    import_service.import_text(_rows("2024-01-01,Lent,-100,Debt:Out,alice,"))
    assert debt_ledger_service.search_debtors("")[0].paid is False

    import_service.import_text(
        _rows("2024-01-01,Lent,-100,Debt:Out,alice,", "2024-01-15,Back,100,Debt:Out,alice,")
    )
    assert debt_ledger_service.search_debtors("")[0].paid is True


def test_plain_debt_tag_defaults_to_out(import_service, debt_ledger_service):
    import_service.import_text(_rows("2024-01-01,Lent,-20,Debt,dan,"))

    (entry,) = debt_ledger_service.search_debtors("")

    assert entry.direction == DebtDirection.OUT


def test_direction_fixed_at_first_record(import_service, debt_ledger_service):
    import_service.import_text(
        _rows(
            "2024-01-01,Lent,-100,Debt:Out,erin,",
            "2024-01-02,Borrowed,300,Debt:In,erin,",
        )
    )

    (entry,) = debt_ledger_service.search_debtors("")

    assert entry.direction == DebtDirection.OUT
    assert entry.balance == 200.0
    assert entry.paid is True


def test_related_rows_in_ingestion_order(import_service, debt_ledger_service):
    import_service.import_text(
        _rows(
            '"January 1, 2024",Loan,100,Debt:In,bob,',
            "2024-02-01,Repay,-40.5,Debt:In,bob,",
            "2024-02-15,Repay,-10,Debt:In,bob,",
        )
    )

    (entry,) = debt_ledger_service.search_debtors("")

    assert entry.related_rows == (
        "January 1, 2024: 100 PHP",
        "2024-02-01: -40.5 PHP",
        "2024-02-15: -10 PHP",
    )


def test_related_rows_use_configured_currency(import_service, temp_db):
    import_service.import_text(_rows("2024-01-01,Loan,100,Debt:In,bob,"))

    service = DebtLedgerService(temp_db, currency="USD")

    assert service.search_debtors("")[0].related_rows == ("2024-01-01: 100 USD",)


def test_non_debt_records_ignored(import_service, debt_ledger_service):
    import_service.import_text(
        _rows("2024-01-01,Dinner,-50,Food,bob,", "2024-01-02,Loan,100,Debt:In,bob,")
    )

    (entry,) = debt_ledger_service.search_debtors("")

    assert entry.balance == 100.0
    assert len(entry.related_rows) == 1


def test_records_without_id_ignored(import_service, debt_ledger_service):
    import_service.import_text(_rows("2024-01-01,Loan,100,Debt:In,,"))

    assert debt_ledger_service.search_debtors("") == []


def test_search_is_case_insensitive_substring(import_service, debt_ledger_service):
    import_service.import_text(
        _rows(
            "2024-01-01,a,10,Debt:In,Alice,",
            "2024-01-01,b,10,Debt:In,Malik,",
            "2024-01-01,c,10,Debt:In,bob,",
        )
    )

    ids = [entry.id for entry in debt_ledger_service.search_debtors("LI")]

    assert ids == ["Alice", "Malik"]


def test_search_without_match(import_service, debt_ledger_service):
    import_service.import_text(SAMPLE_CSV)

    assert debt_ledger_service.search_debtors("zed") == []


def test_search_empty_matches_all_sorted(import_service, debt_ledger_service):
    import_service.import_text(SAMPLE_CSV)

    entries = debt_ledger_service.search_debtors("")

    assert [entry.to_dict() for entry in entries] == [
        {
            "id": "alice",
            "balance": -600.0,
            "direction": "Out",
            "paid": False,
            "related_rows": ["March 1, 2024: -1000 PHP", "March 15, 2024: 400 PHP"],
        },
        {
            "id": "bob",
            "balance": 0.0,
            "direction": "In",
            "paid": True,
            "related_rows": ["2024-03-20: 5000 PHP", "2024-04-02T08:00:00Z: -5000 PHP"],
        },
    ]


def test_search_none_treated_as_empty(import_service, debt_ledger_service):
    import_service.import_text(SAMPLE_CSV)

    assert len(debt_ledger_service.search_debtors(None)) == 2


def test_search_on_empty_record_set(debt_ledger_service):
    assert debt_ledger_service.search_debtors("") == []


def test_related_rows_keep_full_precision(import_service, debt_ledger_service):
    import_service.import_text(
        _rows("2024-01-01,Loan,1234.567,Debt:In,bob,", "2024-01-02,Repay,-0.004,Debt:In,bob,")
    )

    (entry,) = debt_ledger_service.search_debtors("bob")

    assert entry.related_rows == (
        "2024-01-01: 1234.567 PHP",
        "2024-01-02: -0.004 PHP",
    )
