import asyncio
import functools
import logging

from . import clock
from .conf import latency_for, ledger_setting
from .exceptions import NotFound, MissingWorkerReference
from .models import (
    Site, Worker, Material, DailyLog, SiteWorkerLog,
    SiteMaterialLog, GalleryImage, SiteStatus, FileCategory,
)
from .store import new_id

logger = logging.getLogger(__name__)

# strong references to writes still in flight
_in_flight = set()


def completes_when_abandoned(operation):
    """
    Run the simulated latency and the write as a task of its own.

    Cancelling the caller (a timeout, a dropped request) does not cancel
    the task, so the write still lands once the latency has passed.
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            async def run():
                await asyncio.sleep(latency_for(operation))
                return await func(*args, **kwargs)

            task = asyncio.ensure_future(run())
            _in_flight.add(task)
            task.add_done_callback(_in_flight.discard)
            return await asyncio.shield(task)
        return wrapper
    return decorator


# =========================================================
# SITE
# =========================================================

@completes_when_abandoned("create_site")
async def create_site(store, *, site_name, location="", owner_name="",
                      owner_contact="", budget=0, total_area="",
                      agreement_file_id=None, site_plan_file_id=None,
                      drive_folder_id=None):
    site = Site(
        site_id=new_id(),
        site_name=site_name,
        location=location,
        owner_name=owner_name,
        owner_contact=owner_contact,
        budget=budget,
        total_area=total_area,
        status=SiteStatus.ONLINE,
        amount_received=0,
        agreement_file_id=agreement_file_id,
        site_plan_file_id=site_plan_file_id,
        drive_folder_id=drive_folder_id,
    )
    store.sites.append(site)
    logger.debug("Created site %s (%s)", site.site_id, site.site_name)
    return site


@completes_when_abandoned("update_site_status")
async def update_site_status(store, site_id, status):
    site = store.find_site(site_id)
    if site is None:
        raise NotFound("Site", site_id)
    site.status = status
    logger.debug("Site %s is now %s", site_id, site.status)
    return site


# =========================================================
# MASTERS
# =========================================================

@completes_when_abandoned("create_worker")
async def create_worker(store, *, worker_name, default_daily_wage=0, contact=None):
    worker = Worker(
        worker_id=new_id(),
        worker_name=worker_name,
        default_daily_wage=default_daily_wage,
        contact=contact,
    )
    store.workers.append(worker)
    logger.debug("Registered worker %s (%s)", worker.worker_id, worker.worker_name)
    return worker


@completes_when_abandoned("create_material")
async def create_material(store, *, material_name, unit, default_value=0):
    material = Material(
        material_id=new_id(),
        material_name=material_name,
        unit=unit,
        default_value=default_value,
    )
    store.materials.append(material)
    logger.debug("Registered material %s (%s)", material.material_id, material.material_name)
    return material


# =========================================================
# DAILY ENTRIES
# =========================================================

@completes_when_abandoned("create_daily_log")
async def create_daily_log(store, *, site_id, date, log_entry):
    # site_id is taken as given
    log = DailyLog(log_id=new_id(), site_id=site_id, date=date, log_entry=log_entry)
    store.daily_logs.append(log)
    return log


@completes_when_abandoned("create_daily_worker_entry")
async def create_daily_worker_entry(store, *, site_id, date, worker_id=None,
                                    worker_name=None, new_worker=None):
    """
    Log a worker on a site for a day, unpaid.

    ``new_worker`` is a dict of ``create_worker`` keyword arguments. When
    given, the worker is registered first and its id is used for the log.
    Registration and the log append are separate steps: nothing undoes the
    registration if the append never happens.

    Returns ``(log, registered_worker_or_None)``.
    """

    registered = None
    if new_worker:
        registered = await create_worker(store, **new_worker)
        worker_id = registered.worker_id

    if not worker_id:
        raise MissingWorkerReference()

    if worker_name is None:
        master = registered or store.find_worker(worker_id)
        worker_name = master.worker_name if master else ""

    log = SiteWorkerLog(
        log_id=new_id(),
        site_id=site_id,
        date=date,
        worker_id=worker_id,
        worker_name=worker_name,
        salary_paid=0,
        paid_status=False,
    )
    store.worker_logs.append(log)
    logger.debug("Logged worker %s on site %s for %s", worker_id, site_id, date)
    return log, registered


@completes_when_abandoned("create_daily_material_entry")
async def create_daily_material_entry(store, *, site_id, date, material_id,
                                      quantity_used, material_name=None,
                                      unit=None, default_value=None):
    """
    Log material used on a site. Name, unit and unit value default to the
    master record's current values and are copied onto the log.
    """

    master = store.find_material(material_id)
    if material_name is None:
        material_name = master.material_name if master else ""
    if unit is None:
        unit = master.unit if master else ""
    if default_value is None:
        default_value = master.default_value if master else 0

    log = SiteMaterialLog(
        log_id=new_id(),
        site_id=site_id,
        date=date,
        material_id=material_id,
        material_name=material_name,
        unit=unit,
        quantity_used=quantity_used,
        default_value=default_value,
        total_cost=quantity_used * default_value,
    )
    store.material_logs.append(log)
    logger.debug("Logged %s %s of %s on site %s", quantity_used, unit, material_name, site_id)
    return log


@completes_when_abandoned("update_worker_salary")
async def update_worker_salary(store, log_id, amount, status):
    log = store.find_worker_log(log_id)
    if log is None:
        raise NotFound("Worker log", log_id)
    log.salary_paid = amount
    log.paid_status = status
    logger.debug("Salary for worker log %s set to %s (paid=%s)", log_id, amount, status)
    return log


# =========================================================
# FILES
# =========================================================

@completes_when_abandoned("attach_file")
async def attach_file(store, site_id, category, description=""):
    """
    Record a file reference against a site and return the new file id.

    Agreement and plan references replace the previous one. Gallery files
    are appended with a display URL. No file content is kept. A category
    other than agreement, plan or gallery records nothing, though a file
    id is still returned.
    """
    site = store.find_site(site_id)
    if site is None:
        raise NotFound("Site", site_id)

    file_id = new_id("file-")

    if category == FileCategory.AGREEMENT:
        site.agreement_file_id = file_id
    elif category == FileCategory.PLAN:
        site.site_plan_file_id = file_id
    elif category == FileCategory.GALLERY:
        store.gallery.append(GalleryImage(
            image_id=new_id(),
            site_id=site_id,
            date_uploaded=clock.today_string(),
            image_file_id=file_id,
            image_url=ledger_setting("GALLERY_URL_TEMPLATE").format(file_id=file_id),
            description=description,
        ))
    else:
        logger.debug("Ignoring file of unknown category %r for site %s", category, site_id)

    return file_id
