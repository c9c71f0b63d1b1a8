"""
Product API views.

These endpoints are used to:
- Create, read, replace and delete products
- Report the top-stock product of every office of a franchise
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.exceptions import validation_error_response
from api.v1.product.serializers import ProductRequestSerializer, ProductResponseSerializer
from core.instrumentation import Status, StatusCode, get_tracer
from offices.infrastructure.repositories.django_office_repository import DjangoOfficeRepository
from products.application.services.product_service import ProductService
from products.domain.product import Product
from products.infrastructure.repositories.django_product_repository import (
    DjangoProductRepository,
)

# Initialize repositories (in production, use DI container)
_product_repo = DjangoProductRepository()
_office_repo = DjangoOfficeRepository()

tracer = get_tracer(__name__)


def _service() -> ProductService:
    return ProductService(product_repository=_product_repo, office_repository=_office_repo)


def _product_from(validated_data: dict, product_id=None) -> Product:
    return Product.create(
        name=validated_data.get("name"),
        stock=validated_data.get("stock"),
        office_id=validated_data.get("office_id"),
        product_id=product_id,
    )


class ProductCreateView(APIView):
    """View for creating products."""

    @extend_schema(
        operation_id="create_product",
        summary="Create Product",
        description=(
            "Create a product in an existing office. Stock cannot be negative "
            "and product names are unique."
        ),
        tags=["Products"],
        request=ProductRequestSerializer,
        responses={
            201: ProductResponseSerializer,
            400: {"description": "Invalid input or name already in use"},
            404: {"description": "Office not found"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create a product."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for create product."""
        with tracer.start_as_current_span("create_product") as span:
            span.set_attribute("operation", "create_product")

            serializer = ProductRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            product = _product_from(serializer.validated_data)
            span.set_attribute("office.id", product.office_id)

            result = await _service().create_product(product)

            span.set_attribute("product.id", result.id)
            span.set_status(Status(StatusCode.OK))

            return Response(ProductResponseSerializer(result).data, status=status.HTTP_201_CREATED)


class ProductDetailView(APIView):
    """View for reading, replacing and deleting a product."""

    @extend_schema(
        operation_id="get_product",
        summary="Get Product",
        tags=["Products"],
        responses={
            200: ProductResponseSerializer,
            404: {"description": "Product not found"},
        },
    )
    def get(self, request: Request, product_id: int) -> Response:
        """Get a product."""
        return async_to_sync(self._handle_get)(request, product_id)

    async def _handle_get(self, _request: Request, product_id: int) -> Response:
        """Async handler for get product."""
        with tracer.start_as_current_span("get_product") as span:
            span.set_attribute("product.id", product_id)

            result = await _service().get_product(product_id)

            span.set_status(Status(StatusCode.OK))

            return Response(ProductResponseSerializer(result).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_product",
        summary="Update Product",
        description=(
            "Replace a product. The id in the body must match the id in the path "
            "and the office cannot change."
        ),
        tags=["Products"],
        request=ProductRequestSerializer,
        responses={
            200: ProductResponseSerializer,
            400: {"description": "Invalid input, name conflict, id mismatch or office change"},
            404: {"description": "Product not found"},
        },
    )
    def put(self, request: Request, product_id: int) -> Response:
        """Replace a product."""
        return async_to_sync(self._handle_update)(request, product_id)

    async def _handle_update(self, request: Request, product_id: int) -> Response:
        """Async handler for update product."""
        with tracer.start_as_current_span("update_product") as span:
            span.set_attribute("product.id", product_id)

            serializer = ProductRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            product = _product_from(
                serializer.validated_data, product_id=serializer.validated_data.get("id")
            )
            result = await _service().update_product(product_id, product)

            span.set_attribute("product.stock", result.stock)
            span.set_status(Status(StatusCode.OK))

            return Response(ProductResponseSerializer(result).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="delete_product",
        summary="Delete Product",
        tags=["Products"],
        responses={
            204: None,
            404: {"description": "Product not found"},
        },
    )
    def delete(self, request: Request, product_id: int) -> Response:
        """Delete a product."""
        return async_to_sync(self._handle_delete)(request, product_id)

    async def _handle_delete(self, _request: Request, product_id: int) -> Response:
        """Async handler for delete product."""
        with tracer.start_as_current_span("delete_product") as span:
            span.set_attribute("product.id", product_id)

            await _service().delete_product(product_id)

            span.set_status(Status(StatusCode.OK))

            return Response(status=status.HTTP_204_NO_CONTENT)


class TopStockProductsView(APIView):
    """View for the top-stock product of each office of a franchise."""

    @extend_schema(
        operation_id="top_stock_products",
        summary="Top Stock Products",
        description=(
            "For each office of the franchise that holds products, return the product "
            "with the most stock. Ties go to the lowest product id."
        ),
        tags=["Products"],
        responses={200: ProductResponseSerializer(many=True)},
    )
    def get(self, request: Request, franchise_id: int) -> Response:
        """Get the top-stock product per office."""
        return async_to_sync(self._handle_top_stock)(request, franchise_id)

    async def _handle_top_stock(self, _request: Request, franchise_id: int) -> Response:
        """Async handler for top stock products."""
        with tracer.start_as_current_span("top_stock_products") as span:
            span.set_attribute("franchise.id", franchise_id)

            products = await _service().top_stock_by_franchise(franchise_id)

            span.set_attribute("products.count", len(products))
            span.set_status(Status(StatusCode.OK))

            return Response(
                ProductResponseSerializer(products, many=True).data, status=status.HTTP_200_OK
            )
