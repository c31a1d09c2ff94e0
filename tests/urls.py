from django.urls import include, path

urlpatterns = [
    path("", include("site_ledger.urls")),
]
