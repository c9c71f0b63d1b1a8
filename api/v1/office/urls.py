"""
URL configuration for office API endpoints.
"""

from django.urls import path

from api.v1.office import views

app_name = "office"

urlpatterns = [
    path("", views.OfficeCreateView.as_view(), name="create"),
    path("<int:office_id>", views.OfficeDetailView.as_view(), name="detail"),
]
