from django.urls import path
from . import views

app_name = "site_ledger"

urlpatterns = [

    # ================= DASHBOARD =================
    path("", views.dashboard, name="dashboard"),
    path("initial/", views.initial_data, name="initial_data"),

    # ================= SITE =================
    path("sites/", views.site_create, name="site_create"),
    path("site/<str:site_id>/", views.site_detail, name="site_detail"),
    path("site/<str:site_id>/status/", views.site_status, name="site_status"),
    path("site/<str:site_id>/logs/", views.site_daily_log, name="site_daily_log"),
    path("site/<str:site_id>/workers/", views.site_daily_worker, name="site_daily_worker"),
    path("site/<str:site_id>/materials/", views.site_daily_material, name="site_daily_material"),
    path("site/<str:site_id>/files/", views.site_attach_file, name="site_attach_file"),
    path("site/<str:site_id>/report/pdf/", views.site_report_pdf, name="site_report_pdf"),

    # ================= WORKERS =================
    path("workers/", views.worker_create, name="worker_create"),
    path("workers/today/", views.workers_today, name="workers_today"),
    path("worker-logs/<str:log_id>/salary/", views.worker_salary, name="worker_salary"),

    # ================= MATERIALS =================
    path("materials/", views.material_create, name="material_create"),
    path("materials/log/", views.material_log, name="material_log"),
]
