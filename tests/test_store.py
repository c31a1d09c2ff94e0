from datetime import date

from site_ledger.conf import latency_for
from site_ledger.store import RecordStore, new_id


def test_lookups(store):
    assert store.find_site("s-b").site_name == "Bravo Towers"
    assert store.find_site("nope") is None
    assert store.find_worker("w-2").contact == "9988776655"
    assert store.find_material("m-2").unit == "nos"
    assert store.site_name("nope") == "Unknown Site"
    assert store.online_site_ids() == {"s-a", "s-b"}


def test_new_id_prefix():
    assert new_id("file-").startswith("file-")
    assert new_id() != new_id()


def test_separate_stores_do_not_share_state():
    one, two = RecordStore(), RecordStore()
    one.sites.append(object())
    assert two.sites == []


def test_demo_logs_are_dated_today():
    store = RecordStore.demo(date(2024, 3, 15))
    assert {l.date for l in store.worker_logs} == {"2024-03-15"}
    assert store.material_logs[0].total_cost == 50 * 450
    assert store.find_site("s-3").status == "Offline"


def test_test_settings_disable_latency(settings):
    assert latency_for("attach_file") == 0
    settings.SITE_LEDGER = {"LATENCY": {"attach_file": 2}}
    assert latency_for("attach_file") == 2
    assert latency_for("site_details") == 0.6
