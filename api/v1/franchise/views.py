"""
Franchise API views.

These endpoints are used to:
- Create and replace franchises
- Read a franchise together with its offices
- List the offices of a franchise
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.exceptions import validation_error_response
from api.v1.franchise.serializers import FranchiseRequestSerializer, FranchiseResponseSerializer
from api.v1.office.serializers import OfficeResponseSerializer
from core.instrumentation import Status, StatusCode, get_tracer
from franchises.application.services.franchise_service import FranchiseService
from franchises.domain.franchise import Franchise
from franchises.infrastructure.repositories.django_franchise_repository import (
    DjangoFranchiseRepository,
)
from offices.infrastructure.repositories.django_office_repository import DjangoOfficeRepository

# Initialize repositories (in production, use DI container)
_franchise_repo = DjangoFranchiseRepository()
_office_repo = DjangoOfficeRepository()

tracer = get_tracer(__name__)


def _service() -> FranchiseService:
    return FranchiseService(franchise_repository=_franchise_repo, office_repository=_office_repo)


class FranchiseCreateView(APIView):
    """View for creating franchises."""

    @extend_schema(
        operation_id="create_franchise",
        summary="Create Franchise",
        description="Create a franchise. The name is trimmed, upper-cased and must be unique.",
        tags=["Franchises"],
        request=FranchiseRequestSerializer,
        responses={
            201: FranchiseResponseSerializer,
            400: {"description": "Invalid name or name already in use"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create a franchise."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for create franchise."""
        with tracer.start_as_current_span("create_franchise") as span:
            span.set_attribute("operation", "create_franchise")

            serializer = FranchiseRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            franchise = Franchise.create(name=serializer.validated_data.get("name"))
            result = await _service().create_franchise(franchise)

            span.set_attribute("franchise.id", result.id)
            span.set_status(Status(StatusCode.OK))

            return Response(
                FranchiseResponseSerializer(result).data, status=status.HTTP_201_CREATED
            )


class FranchiseDetailView(APIView):
    """View for reading and replacing a franchise."""

    @extend_schema(
        operation_id="get_franchise",
        summary="Get Franchise",
        description="Get a franchise together with the offices it owns.",
        tags=["Franchises"],
        responses={
            200: FranchiseResponseSerializer,
            404: {"description": "Franchise not found"},
        },
    )
    def get(self, request: Request, franchise_id: int) -> Response:
        """Get a franchise with its offices."""
        return async_to_sync(self._handle_get)(request, franchise_id)

    async def _handle_get(self, _request: Request, franchise_id: int) -> Response:
        """Async handler for get franchise."""
        with tracer.start_as_current_span("get_franchise") as span:
            span.set_attribute("franchise.id", franchise_id)

            result = await _service().get_franchise(franchise_id)

            span.set_attribute("offices.count", len(result.offices))
            span.set_status(Status(StatusCode.OK))

            return Response(FranchiseResponseSerializer(result).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_franchise",
        summary="Update Franchise",
        description=(
            "Replace a franchise. The id in the body must match the id in the path, "
            "and the new name must not belong to another franchise."
        ),
        tags=["Franchises"],
        request=FranchiseRequestSerializer,
        responses={
            200: FranchiseResponseSerializer,
            400: {"description": "Invalid name, name conflict or id mismatch"},
            404: {"description": "Franchise not found"},
        },
    )
    def put(self, request: Request, franchise_id: int) -> Response:
        """Replace a franchise."""
        return async_to_sync(self._handle_update)(request, franchise_id)

    async def _handle_update(self, request: Request, franchise_id: int) -> Response:
        """Async handler for update franchise."""
        with tracer.start_as_current_span("update_franchise") as span:
            span.set_attribute("franchise.id", franchise_id)

            serializer = FranchiseRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            franchise = Franchise.create(
                name=serializer.validated_data.get("name"),
                franchise_id=serializer.validated_data.get("id"),
            )
            result = await _service().update_franchise(franchise_id, franchise)

            span.set_status(Status(StatusCode.OK))

            return Response(FranchiseResponseSerializer(result).data, status=status.HTTP_200_OK)


class FranchiseOfficesView(APIView):
    """View for listing the offices of a franchise."""

    @extend_schema(
        operation_id="list_franchise_offices",
        summary="List Franchise Offices",
        description="List the offices of a franchise. Unknown franchises yield an empty list.",
        tags=["Franchises"],
        responses={200: OfficeResponseSerializer(many=True)},
    )
    def get(self, request: Request, franchise_id: int) -> Response:
        """List the offices of a franchise."""
        return async_to_sync(self._handle_list)(request, franchise_id)

    async def _handle_list(self, _request: Request, franchise_id: int) -> Response:
        """Async handler for list offices."""
        with tracer.start_as_current_span("list_franchise_offices") as span:
            span.set_attribute("franchise.id", franchise_id)

            offices = await _service().list_offices(franchise_id)

            span.set_attribute("offices.count", len(offices))
            span.set_status(Status(StatusCode.OK))

            return Response(
                OfficeResponseSerializer(offices, many=True).data, status=status.HTTP_200_OK
            )
