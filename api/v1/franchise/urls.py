"""
URL configuration for franchise API endpoints.
"""

from django.urls import path

from api.v1.franchise import views

app_name = "franchise"

urlpatterns = [
    path("", views.FranchiseCreateView.as_view(), name="create"),
    path("<int:franchise_id>", views.FranchiseDetailView.as_view(), name="detail"),
    path("<int:franchise_id>/offices", views.FranchiseOfficesView.as_view(), name="offices"),
]
