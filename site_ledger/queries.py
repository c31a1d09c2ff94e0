import asyncio
from dataclasses import asdict
from datetime import date

from django.utils.dateparse import parse_date

from . import clock
from .conf import latency_for
from .exceptions import NotFound
from .models import (
    SiteDetails, ExpenseBreakdown, TodayWorker, OverallMaterialLog,
    DashboardMetrics, InitialData, SiteStatus,
)


# =========================================================
# HELPERS
# =========================================================

def to_date(value):
    try:
        return parse_date(value or "")
    except (TypeError, ValueError):
        return None


def newest_first(records, attr="date"):
    # calendar dates only; unparseable dates go last
    return sorted(
        records,
        key=lambda r: to_date(getattr(r, attr)) or date.min,
        reverse=True,
    )


def in_month(value, year, month):
    d = to_date(value)
    return d is not None and d.year == year and d.month == month


# =========================================================
# INITIAL DATA
# =========================================================

async def initial_data(store):
    await asyncio.sleep(latency_for("initial_data"))
    return InitialData(
        sites=list(store.sites),
        workers=list(store.workers),
        materials=list(store.materials),
    )


# =========================================================
# SITE DETAILS
# =========================================================

async def site_details(store, site_id):
    await asyncio.sleep(latency_for("site_details"))

    site = store.find_site(site_id)
    if site is None:
        raise NotFound("Site", site_id)

    logs = newest_first(l for l in store.daily_logs if l.site_id == site_id)
    worker_logs = newest_first(l for l in store.worker_logs if l.site_id == site_id)
    material_logs = newest_first(l for l in store.material_logs if l.site_id == site_id)
    gallery = newest_first(
        (g for g in store.gallery if g.site_id == site_id), attr="date_uploaded"
    )

    worker_expense = sum(l.salary_paid for l in worker_logs)
    material_expense = sum(l.total_cost for l in material_logs)

    return SiteDetails(
        site=site,
        logs=logs,
        worker_logs=worker_logs,
        material_logs=material_logs,
        gallery=gallery,
        expenses=ExpenseBreakdown(
            total_expenses=worker_expense + material_expense,
            worker_expense=worker_expense,
            material_expense=material_expense,
        ),
    )


# =========================================================
# WORKERS / MATERIALS
# =========================================================

async def today_workers(store):
    """
    Worker logs dated today on Online sites.

    The wage shown is the worker's current master wage, not the one in
    effect when the log was written.
    """
    await asyncio.sleep(latency_for("today_workers"))

    today = clock.today_string()
    online = store.online_site_ids()

    rows = []
    for log in store.worker_logs:
        if log.date != today or log.site_id not in online:
            continue
        worker = store.find_worker(log.worker_id)
        rows.append(TodayWorker(
            **asdict(log),
            site_name=store.site_name(log.site_id),
            default_daily_wage=worker.default_daily_wage if worker else 0,
        ))
    return rows


async def overall_material_log(store):
    await asyncio.sleep(latency_for("overall_material_log"))
    return [
        OverallMaterialLog(**asdict(log), site_name=store.site_name(log.site_id))
        for log in newest_first(store.material_logs)
    ]


# =========================================================
# DASHBOARD
# =========================================================

async def dashboard_metrics(store):
    await asyncio.sleep(latency_for("dashboard_metrics"))

    today = clock.today()
    today_str = today.isoformat()

    online_sites = sum(1 for s in store.sites if s.status == SiteStatus.ONLINE)
    offline_sites = len(store.sites) - online_sites

    # ================= TODAY =================
    worker_today = [l for l in store.worker_logs if l.date == today_str]
    material_today = [l for l in store.material_logs if l.date == today_str]

    today_expense = (
        sum(l.salary_paid or 0 for l in worker_today) +
        sum(l.total_cost or 0 for l in material_today)
    )

    # ================= MONTH =================
    month_expense = (
        sum(l.salary_paid or 0 for l in store.worker_logs
            if in_month(l.date, today.year, today.month)) +
        sum(l.total_cost or 0 for l in store.material_logs
            if in_month(l.date, today.year, today.month))
    )

    return DashboardMetrics(
        online_sites=online_sites,
        offline_sites=offline_sites,
        today_workers=len(worker_today),
        today_materials=len(material_today),
        today_expense=today_expense,
        month_expense=month_expense,
    )
