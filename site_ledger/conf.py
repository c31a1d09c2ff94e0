from django.conf import settings

DEFAULTS = {
    # seconds of simulated I/O per operation, or one number for all of them
    "LATENCY": {
        "initial_data": 0.5,
        "create_site": 0.3,
        "update_site_status": 0.2,
        "site_details": 0.6,
        "today_workers": 0.4,
        "overall_material_log": 0.4,
        "create_worker": 0.3,
        "create_material": 0.3,
        "create_daily_log": 0.3,
        "create_daily_worker_entry": 0.4,
        "create_daily_material_entry": 0.3,
        "update_worker_salary": 0.25,
        "attach_file": 1.0,
        "dashboard_metrics": 0.5,
    },
    "GALLERY_URL_TEMPLATE": "https://picsum.photos/seed/{file_id}/400/400",
    "SEED_DEMO_DATA": False,
    "CURRENCY": "INR",
}


def ledger_setting(name):
    user = getattr(settings, "SITE_LEDGER", None) or {}
    value = user.get(name, DEFAULTS[name])
    if name == "LATENCY" and isinstance(value, dict):
        return {**DEFAULTS["LATENCY"], **value}
    return value


def latency_for(operation):
    latency = ledger_setting("LATENCY")
    if isinstance(latency, dict):
        return float(latency.get(operation, 0))
    return float(latency)
