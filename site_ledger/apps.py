from django.apps import AppConfig


class SiteLedgerConfig(AppConfig):
    name = 'site_ledger'
    verbose_name = "Site ledger"

    store = None

    def ready(self):
        from . import clock
        from .conf import ledger_setting
        from .store import RecordStore

        if ledger_setting("SEED_DEMO_DATA"):
            self.store = RecordStore.demo(clock.today())
        else:
            self.store = RecordStore()
