from django import forms

from .models import SiteStatus, FileCategory


class IsoDateField(forms.DateField):
    """Accepts YYYY-MM-DD and hands back the same ISO string."""

    input_formats = ["%Y-%m-%d"]

    def clean(self, value):
        value = super().clean(value)
        return value.isoformat() if value else value


# ---------- SITE ----------
class SiteForm(forms.Form):
    site_name = forms.CharField(max_length=100)
    location = forms.CharField(max_length=200, required=False)
    owner_name = forms.CharField(max_length=100, required=False)
    owner_contact = forms.CharField(max_length=20, required=False)
    budget = forms.FloatField(required=False)
    total_area = forms.CharField(max_length=50, required=False)
    drive_folder_id = forms.CharField(max_length=100, required=False)

    def clean_budget(self):
        return self.cleaned_data.get("budget") or 0

    def clean_drive_folder_id(self):
        return self.cleaned_data.get("drive_folder_id") or None


class SiteStatusForm(forms.Form):
    status = forms.ChoiceField(choices=SiteStatus.choices)


# ---------- MASTERS ----------
class WorkerForm(forms.Form):
    worker_name = forms.CharField(max_length=100)
    contact = forms.CharField(max_length=20, required=False)
    default_daily_wage = forms.FloatField(min_value=0)

    def clean_contact(self):
        return self.cleaned_data.get("contact") or None


class MaterialForm(forms.Form):
    material_name = forms.CharField(max_length=100)
    unit = forms.CharField(max_length=20)
    default_value = forms.FloatField(min_value=0)


# ---------- DAILY ENTRIES ----------
class DailyLogForm(forms.Form):
    date = IsoDateField()
    log_entry = forms.CharField(widget=forms.Textarea)


class DailyWorkerForm(forms.Form):
    """
    Either ``worker_id`` of a listed worker, or ``new_worker_name`` (with
    optional contact and wage) to register one on the spot.
    """

    date = IsoDateField()
    worker_id = forms.CharField(max_length=64, required=False)
    worker_name = forms.CharField(max_length=100, required=False)
    new_worker_name = forms.CharField(max_length=100, required=False)
    new_worker_contact = forms.CharField(max_length=20, required=False)
    new_worker_wage = forms.FloatField(min_value=0, required=False)

    def new_worker(self):
        data = self.cleaned_data
        if not data.get("new_worker_name"):
            return None
        return {
            "worker_name": data["new_worker_name"],
            "contact": data.get("new_worker_contact") or None,
            "default_daily_wage": data.get("new_worker_wage") or 0,
        }


class DailyMaterialForm(forms.Form):
    date = IsoDateField()
    material_id = forms.CharField(max_length=64)
    quantity_used = forms.FloatField()
    material_name = forms.CharField(max_length=100, required=False)
    unit = forms.CharField(max_length=20, required=False)
    default_value = forms.FloatField(required=False)


class SalaryForm(forms.Form):
    amount = forms.FloatField(min_value=0)
    status = forms.BooleanField(required=False)


class AttachFileForm(forms.Form):
    category = forms.ChoiceField(choices=FileCategory.choices)
    description = forms.CharField(max_length=255, required=False)
