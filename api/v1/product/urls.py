"""
URL configuration for product API endpoints.
"""

from django.urls import path

from api.v1.product import views

app_name = "product"

urlpatterns = [
    path("", views.ProductCreateView.as_view(), name="create"),
    path("<int:product_id>", views.ProductDetailView.as_view(), name="detail"),
    path(
        "top-products/<int:franchise_id>",
        views.TopStockProductsView.as_view(),
        name="top-products",
    ),
]
