import asyncio

import pytest

from site_ledger import mutations, queries
from site_ledger.exceptions import NotFound
from site_ledger.models import (
    DailyLog, SiteWorkerLog, SiteMaterialLog, GalleryImage, SiteStatus,
)
from site_ledger.store import RecordStore


def run(coro):
    return asyncio.run(coro)


# =========================================================
# SITE DETAILS
# =========================================================

def test_site_expense_scenario(store):
    run(mutations.create_daily_material_entry(
        store, site_id="s-a", date="2024-03-10", material_id="m-1",
        quantity_used=10, default_value=100,
    ))
    log, _ = run(mutations.create_daily_worker_entry(
        store, site_id="s-a", date="2024-03-10", worker_id="w-1",
    ))
    run(mutations.update_worker_salary(store, log.log_id, 500, True))

    expenses = run(queries.site_details(store, "s-a")).expenses
    assert expenses.total_expenses == 1500
    assert expenses.worker_expense == 500
    assert expenses.material_expense == 1000


def test_site_details_only_counts_own_logs(store):
    store.worker_logs += [
        SiteWorkerLog("l1", "s-a", "2024-03-01", "w-1", "Ramesh Kumar", 800, True),
        SiteWorkerLog("l2", "s-a", "2024-03-02", "w-2", "Suresh Singh", 0, False),
        SiteWorkerLog("l3", "s-b", "2024-03-02", "w-2", "Suresh Singh", 950, True),
    ]
    store.material_logs += [
        SiteMaterialLog("m1", "s-a", "2024-03-01", "m-2", "Bricks", "nos", 100, 12, 1200),
        SiteMaterialLog("m2", "s-b", "2024-03-01", "m-1", "Cement", "bag", 4, 450, 1800),
    ]

    details = run(queries.site_details(store, "s-a"))
    assert [l.log_id for l in details.worker_logs] == ["l2", "l1"]
    assert [l.log_id for l in details.material_logs] == ["m1"]
    assert details.expenses.worker_expense == 800
    assert details.expenses.material_expense == 1200
    assert details.expenses.total_expenses == 2000


def test_site_details_sorts_newest_first(store):
    store.daily_logs += [
        DailyLog("d1", "s-a", "2024-01-05", "Excavation"),
        DailyLog("d2", "s-a", "2024-02-20", "Footings"),
        DailyLog("d3", "s-a", "not-a-date", "Unknown"),
        DailyLog("d4", "s-a", "2023-12-31", "Survey"),
    ]
    store.gallery += [
        GalleryImage("g1", "s-a", "2024-01-01", "f1", "u1"),
        GalleryImage("g2", "s-a", "2024-03-01", "f2", "u2"),
    ]

    details = run(queries.site_details(store, "s-a"))
    assert [l.log_id for l in details.logs] == ["d2", "d1", "d4", "d3"]
    assert [g.image_id for g in details.gallery] == ["g2", "g1"]


def test_site_details_unknown_site(store):
    with pytest.raises(NotFound):
        run(queries.site_details(store, "missing"))


# =========================================================
# TODAY'S WORKERS
# =========================================================

def test_today_workers_skips_offline_sites_and_other_days(store, today):
    store.worker_logs += [
        SiteWorkerLog("l1", "s-a", "2024-03-15", "w-1", "Ramesh Kumar"),
        SiteWorkerLog("l2", "s-c", "2024-03-15", "w-2", "Suresh Singh"),
        SiteWorkerLog("l3", "s-b", "2024-03-14", "w-2", "Suresh Singh"),
    ]

    rows = run(queries.today_workers(store))
    assert [r.log_id for r in rows] == ["l1"]
    assert rows[0].site_name == "Alpha Residency"


def test_today_workers_follow_site_status_changes(store, today):
    store.worker_logs.append(SiteWorkerLog("l1", "s-a", "2024-03-15", "w-1", "Ramesh Kumar"))
    run(mutations.update_site_status(store, "s-a", SiteStatus.OFFLINE))
    assert run(queries.today_workers(store)) == []


def test_today_workers_show_current_master_wage(store, today):
    store.worker_logs.append(SiteWorkerLog("l1", "s-a", "2024-03-15", "w-1", "Ramesh Kumar"))
    worker = store.find_worker("w-1")
    worker.default_daily_wage = 900
    worker.worker_name = "Ramesh K."

    row, = run(queries.today_workers(store))
    assert row.default_daily_wage == 900
    assert row.worker_name == "Ramesh Kumar"


def test_today_workers_with_unlisted_worker(store, today):
    store.worker_logs.append(SiteWorkerLog("l1", "s-b", "2024-03-15", "w-gone", "Temp"))
    row, = run(queries.today_workers(store))
    assert row.default_daily_wage == 0


# =========================================================
# OVERALL MATERIAL LOG
# =========================================================

def test_overall_material_log_joins_site_names(store):
    store.material_logs += [
        SiteMaterialLog("m1", "s-a", "2024-03-01", "m-2", "Bricks", "nos", 100, 12, 1200),
        SiteMaterialLog("m2", "s-c", "2024-03-09", "m-1", "Cement", "bag", 4, 450, 1800),
        SiteMaterialLog("m3", "s-x", "2024-02-11", "m-1", "Cement", "bag", 1, 450, 450),
    ]

    rows = run(queries.overall_material_log(store))
    assert [(r.log_id, r.site_name) for r in rows] == [
        ("m2", "Charlie Mall"),
        ("m1", "Alpha Residency"),
        ("m3", "Unknown Site"),
    ]
    assert rows[0].total_cost == 1800


# =========================================================
# DASHBOARD
# =========================================================

def test_dashboard_site_counts(store, today):
    metrics = run(queries.dashboard_metrics(store))
    assert metrics.online_sites == 2
    assert metrics.offline_sites == 1


def test_dashboard_today_and_month(store, today):
    store.worker_logs += [
        SiteWorkerLog("l1", "s-a", "2024-03-15", "w-1", "Ramesh Kumar", 800, True),
        SiteWorkerLog("l2", "s-c", "2024-03-15", "w-2", "Suresh Singh", 0, False),
        SiteWorkerLog("l3", "s-b", "2024-03-02", "w-2", "Suresh Singh", 950, True),
        SiteWorkerLog("l4", "s-b", "2024-02-28", "w-2", "Suresh Singh", 950, True),
        SiteWorkerLog("l5", "s-b", "2023-03-15", "w-2", "Suresh Singh", 950, True),
    ]
    store.material_logs += [
        SiteMaterialLog("m1", "s-c", "2024-03-15", "m-1", "Cement", "bag", 2, 450, 900),
        SiteMaterialLog("m2", "s-a", "2024-03-01", "m-2", "Bricks", "nos", 100, 12, 1200),
        SiteMaterialLog("m3", "s-a", "garbage", "m-2", "Bricks", "nos", 1, 12, 12),
    ]

    metrics = run(queries.dashboard_metrics(store))
    assert metrics.today_workers == 2
    assert metrics.today_materials == 1
    assert metrics.today_expense == 800 + 900
    assert metrics.month_expense == 800 + 950 + 900 + 1200


def test_dashboard_on_empty_store(today):
    metrics = run(queries.dashboard_metrics(RecordStore()))
    assert (metrics.online_sites, metrics.offline_sites) == (0, 0)
    assert metrics.today_expense == 0
    assert metrics.month_expense == 0


# =========================================================
# INITIAL DATA / DEMO
# =========================================================

def test_initial_data_lists_masters(store):
    data = run(queries.initial_data(store))
    assert [s.site_id for s in data.sites] == ["s-a", "s-b", "s-c"]
    assert len(data.workers) == 2
    assert len(data.materials) == 2


def test_demo_store_dashboard(today):
    metrics = run(queries.dashboard_metrics(RecordStore.demo(today)))
    assert metrics.online_sites == 2
    assert metrics.offline_sites == 1
    assert metrics.today_workers == 2
    assert metrics.today_materials == 1
    assert metrics.today_expense == 800 + 22500
