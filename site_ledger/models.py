from dataclasses import dataclass, field
from typing import List, Optional

from django.db import models


class SiteStatus(models.TextChoices):
    ONLINE = "Online", "Online"
    OFFLINE = "Offline", "Offline"


class FileCategory(models.TextChoices):
    AGREEMENT = "agreement", "Agreement"
    PLAN = "plan", "Site plan"
    GALLERY = "gallery", "Gallery"


# ---------- SITE ----------
@dataclass
class Site:
    site_id: str
    site_name: str
    location: str = ""
    owner_name: str = ""
    owner_contact: str = ""
    budget: float = 0
    total_area: str = ""
    status: str = SiteStatus.ONLINE
    amount_received: float = 0
    agreement_file_id: Optional[str] = None
    site_plan_file_id: Optional[str] = None
    drive_folder_id: Optional[str] = None

    def __str__(self):
        return self.site_name


# ---------- MASTER LISTS ----------
@dataclass
class Worker:
    worker_id: str
    worker_name: str
    default_daily_wage: float = 0
    contact: Optional[str] = None

    def __str__(self):
        return self.worker_name


@dataclass
class Material:
    material_id: str
    material_name: str
    unit: str
    default_value: float = 0

    def __str__(self):
        return self.material_name


# ---------- SITE LOGS ----------
@dataclass
class DailyLog:
    log_id: str
    site_id: str
    date: str
    log_entry: str


@dataclass
class SiteWorkerLog:
    log_id: str
    site_id: str
    date: str
    worker_id: str
    worker_name: str
    salary_paid: float = 0
    paid_status: bool = False


@dataclass
class SiteMaterialLog:
    log_id: str
    site_id: str
    date: str
    material_id: str
    material_name: str
    unit: str
    quantity_used: float
    default_value: float
    total_cost: float


@dataclass
class GalleryImage:
    image_id: str
    site_id: str
    date_uploaded: str
    image_file_id: str
    image_url: str
    description: str = ""


# ---------- DERIVED VIEWS ----------
@dataclass
class ExpenseBreakdown:
    total_expenses: float
    worker_expense: float
    material_expense: float


@dataclass
class SiteDetails:
    site: Site
    logs: List[DailyLog] = field(default_factory=list)
    worker_logs: List[SiteWorkerLog] = field(default_factory=list)
    material_logs: List[SiteMaterialLog] = field(default_factory=list)
    gallery: List[GalleryImage] = field(default_factory=list)
    expenses: Optional[ExpenseBreakdown] = None


@dataclass
class TodayWorker(SiteWorkerLog):
    site_name: str = ""
    default_daily_wage: float = 0


@dataclass
class OverallMaterialLog(SiteMaterialLog):
    site_name: str = ""


@dataclass
class DashboardMetrics:
    online_sites: int
    offline_sites: int
    today_workers: int
    today_materials: int
    today_expense: float
    month_expense: float


@dataclass
class InitialData:
    sites: List[Site]
    workers: List[Worker]
    materials: List[Material]
