import uuid
from datetime import date

from .models import (
    Site, Worker, Material, DailyLog,
    SiteWorkerLog, SiteMaterialLog, GalleryImage, SiteStatus,
)


def new_id(prefix=""):
    return f"{prefix}{uuid.uuid4()}"


class RecordStore:
    """
    In-memory collections shared by queries and mutations.

    One instance is owned by the app config; tests build their own.
    Nothing here survives the process.
    """

    def __init__(self, sites=None, workers=None, materials=None,
                 daily_logs=None, worker_logs=None, material_logs=None,
                 gallery=None):
        self.sites = list(sites or [])
        self.workers = list(workers or [])
        self.materials = list(materials or [])
        self.daily_logs = list(daily_logs or [])
        self.worker_logs = list(worker_logs or [])
        self.material_logs = list(material_logs or [])
        self.gallery = list(gallery or [])

    # ---------- LOOKUPS ----------
    def find_site(self, site_id):
        return next((s for s in self.sites if s.site_id == site_id), None)

    def find_worker(self, worker_id):
        return next((w for w in self.workers if w.worker_id == worker_id), None)

    def find_material(self, material_id):
        return next((m for m in self.materials if m.material_id == material_id), None)

    def find_worker_log(self, log_id):
        return next((l for l in self.worker_logs if l.log_id == log_id), None)

    def site_name(self, site_id):
        site = self.find_site(site_id)
        return site.site_name if site else "Unknown Site"

    def online_site_ids(self):
        return {s.site_id for s in self.sites if s.status == SiteStatus.ONLINE}

    # ---------- DEMO DATA ----------
    @classmethod
    def demo(cls, today=None):
        today = (today or date.today()).isoformat()
        return cls(
            sites=[
                Site("s-1", "Greenwood Villa", "Koramangala, Bangalore", "Mr. Sharma",
                     "9876543210", 5000000, "2400 sqft", SiteStatus.ONLINE, 2000000),
                Site("s-2", "Prestige Apartments", "Whitefield, Bangalore", "Ms. Gupta",
                     "8765432109", 12000000, "10000 sqft", SiteStatus.ONLINE, 5000000),
                Site("s-3", "Commercial Complex", "Indiranagar, Bangalore", "BuildCorp Inc.",
                     "7654321098", 25000000, "15000 sqft", SiteStatus.OFFLINE, 10000000),
            ],
            workers=[
                Worker("w-1", "Ramesh Kumar", 800),
                Worker("w-2", "Suresh Singh", 950, contact="9988776655"),
                Worker("w-3", "Vijay Prasad", 750),
            ],
            materials=[
                Material("m-1", "Cement", "bag", 450),
                Material("m-2", "Steel Rod (12mm)", "kg", 85),
                Material("m-3", "Bricks", "nos", 12),
            ],
            daily_logs=[
                DailyLog("dl-1", "s-1", "2023-10-26",
                         "Foundation work started. Excavation complete."),
            ],
            worker_logs=[
                SiteWorkerLog("swl-1", "s-1", today, "w-1", "Ramesh Kumar", 800, True),
                SiteWorkerLog("swl-2", "s-2", today, "w-2", "Suresh Singh", 0, False),
            ],
            material_logs=[
                SiteMaterialLog("sml-1", "s-1", today, "m-1", "Cement", "bag", 50, 450, 22500),
            ],
        )
