import json
import logging
from dataclasses import asdict

from asgiref.sync import sync_to_async
from django.apps import apps
from django.http import JsonResponse, HttpResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from . import clock, mutations, queries
from .exceptions import NotFound, MissingWorkerReference
from .forms import (
    SiteForm, SiteStatusForm, WorkerForm, MaterialForm,
    DailyLogForm, DailyWorkerForm, DailyMaterialForm,
    SalaryForm, AttachFileForm,
)
from .utils import render_to_pdf

logger = logging.getLogger(__name__)

# =========================================================
# HELPERS
# =========================================================

def get_store():
    return apps.get_app_config("site_ledger").store


def payload(request):
    if request.content_type == "application/json":
        try:
            data = json.loads(request.body or b"{}")
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
    return request.POST


def as_json(data, status=200):
    if isinstance(data, list):
        return JsonResponse([asdict(d) for d in data], safe=False, status=status)
    return JsonResponse(asdict(data), status=status)


def invalid(form):
    return JsonResponse({"errors": form.errors}, status=400)


def not_found(exc):
    logger.warning("%s", exc)
    return JsonResponse({"error": str(exc)}, status=404)


# =========================================================
# DASHBOARD
# =========================================================

@require_GET
async def dashboard(request):
    return as_json(await queries.dashboard_metrics(get_store()))


@require_GET
async def initial_data(request):
    return as_json(await queries.initial_data(get_store()))


# =========================================================
# SITE
# =========================================================

@csrf_exempt
@require_POST
async def site_create(request):
    form = SiteForm(payload(request))
    if not form.is_valid():
        return invalid(form)
    site = await mutations.create_site(get_store(), **form.cleaned_data)
    return as_json(site, status=201)


@require_GET
async def site_detail(request, site_id):
    try:
        details = await queries.site_details(get_store(), site_id)
    except NotFound as exc:
        return not_found(exc)
    return as_json(details)


@csrf_exempt
@require_POST
async def site_status(request, site_id):
    form = SiteStatusForm(payload(request))
    if not form.is_valid():
        return invalid(form)
    try:
        site = await mutations.update_site_status(
            get_store(), site_id, form.cleaned_data["status"]
        )
    except NotFound as exc:
        return not_found(exc)
    return as_json(site)


@csrf_exempt
@require_POST
async def site_daily_log(request, site_id):
    form = DailyLogForm(payload(request))
    if not form.is_valid():
        return invalid(form)
    log = await mutations.create_daily_log(get_store(), site_id=site_id, **form.cleaned_data)
    return as_json(log, status=201)


@csrf_exempt
@require_POST
async def site_daily_worker(request, site_id):
    form = DailyWorkerForm(payload(request))
    if not form.is_valid():
        return invalid(form)

    data = form.cleaned_data
    try:
        log, worker = await mutations.create_daily_worker_entry(
            get_store(),
            site_id=site_id,
            date=data["date"],
            worker_id=data["worker_id"] or None,
            worker_name=data["worker_name"] or None,
            new_worker=form.new_worker(),
        )
    except MissingWorkerReference as exc:
        logger.warning("Worker entry for site %s rejected: %s", site_id, exc)
        return JsonResponse({"error": str(exc)}, status=400)

    return JsonResponse({
        "new_log": asdict(log),
        "new_worker": asdict(worker) if worker else None,
    }, status=201)


@csrf_exempt
@require_POST
async def site_daily_material(request, site_id):
    form = DailyMaterialForm(payload(request))
    if not form.is_valid():
        return invalid(form)

    data = form.cleaned_data
    log = await mutations.create_daily_material_entry(
        get_store(),
        site_id=site_id,
        date=data["date"],
        material_id=data["material_id"],
        quantity_used=data["quantity_used"],
        material_name=data["material_name"] or None,
        unit=data["unit"] or None,
        default_value=data["default_value"],
    )
    return as_json(log, status=201)


@csrf_exempt
@require_POST
async def site_attach_file(request, site_id):
    form = AttachFileForm(payload(request))
    if not form.is_valid():
        return invalid(form)
    try:
        file_id = await mutations.attach_file(
            get_store(), site_id,
            form.cleaned_data["category"],
            form.cleaned_data["description"],
        )
    except NotFound as exc:
        return not_found(exc)
    return JsonResponse({"success": True, "file_id": file_id}, status=201)


@require_GET
async def site_report_pdf(request, site_id):
    try:
        details = await queries.site_details(get_store(), site_id)
    except NotFound as exc:
        return not_found(exc)

    context = {
        "site": details.site,
        "logs": details.logs,
        "worker_logs": details.worker_logs,
        "material_logs": details.material_logs,
        "expenses": details.expenses,
        "generated_on": clock.today_string(),
    }
    response = await sync_to_async(render_to_pdf)(
        "site_ledger/site_report_pdf.html", context,
        filename=f"site-{site_id}.pdf",
    )
    if response is None:
        logger.error("PDF rendering failed for site %s", site_id)
        return HttpResponse("Could not render report", status=500)
    return response


# =========================================================
# WORKERS
# =========================================================

@csrf_exempt
@require_POST
async def worker_create(request):
    form = WorkerForm(payload(request))
    if not form.is_valid():
        return invalid(form)
    worker = await mutations.create_worker(get_store(), **form.cleaned_data)
    return as_json(worker, status=201)


@require_GET
async def workers_today(request):
    return as_json(await queries.today_workers(get_store()))


@csrf_exempt
@require_POST
async def worker_salary(request, log_id):
    form = SalaryForm(payload(request))
    if not form.is_valid():
        return invalid(form)
    try:
        log = await mutations.update_worker_salary(
            get_store(), log_id,
            form.cleaned_data["amount"],
            form.cleaned_data["status"],
        )
    except NotFound as exc:
        return not_found(exc)
    return as_json(log)


# =========================================================
# MATERIALS
# =========================================================

@csrf_exempt
@require_POST
async def material_create(request):
    form = MaterialForm(payload(request))
    if not form.is_valid():
        return invalid(form)
    material = await mutations.create_material(get_store(), **form.cleaned_data)
    return as_json(material, status=201)


@require_GET
async def material_log(request):
    return as_json(await queries.overall_material_log(get_store()))
