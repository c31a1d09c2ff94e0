from datetime import date

import pytest

from site_ledger import clock
from site_ledger.models import Site, Worker, Material, SiteStatus
from site_ledger.store import RecordStore

TODAY = date(2024, 3, 15)


@pytest.fixture
def today(monkeypatch):
    monkeypatch.setattr(clock, "today", lambda: TODAY)
    return TODAY


@pytest.fixture
def store():
    return RecordStore(
        sites=[
            Site("s-a", "Alpha Residency", budget=5000000),
            Site("s-b", "Bravo Towers", budget=1200000),
            Site("s-c", "Charlie Mall", budget=900000, status=SiteStatus.OFFLINE),
        ],
        workers=[
            Worker("w-1", "Ramesh Kumar", 800),
            Worker("w-2", "Suresh Singh", 950, contact="9988776655"),
        ],
        materials=[
            Material("m-1", "Cement", "bag", 450),
            Material("m-2", "Bricks", "nos", 12),
        ],
    )
