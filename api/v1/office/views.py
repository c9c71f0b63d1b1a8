"""
Office API views.

These endpoints are used to create, read and replace offices.
"""

from asgiref.sync import async_to_sync
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.exceptions import validation_error_response
from api.v1.office.serializers import OfficeRequestSerializer, OfficeResponseSerializer
from core.instrumentation import Status, StatusCode, get_tracer
from franchises.infrastructure.repositories.django_franchise_repository import (
    DjangoFranchiseRepository,
)
from offices.application.services.office_service import OfficeService
from offices.domain.office import Office
from offices.infrastructure.repositories.django_office_repository import DjangoOfficeRepository

# Initialize repositories (in production, use DI container)
_office_repo = DjangoOfficeRepository()
_franchise_repo = DjangoFranchiseRepository()

tracer = get_tracer(__name__)


def _service() -> OfficeService:
    return OfficeService(office_repository=_office_repo, franchise_repository=_franchise_repo)


class OfficeCreateView(APIView):
    """View for creating offices."""

    @extend_schema(
        operation_id="create_office",
        summary="Create Office",
        description="Create an office under an existing franchise. Office names are unique.",
        tags=["Offices"],
        request=OfficeRequestSerializer,
        responses={
            201: OfficeResponseSerializer,
            400: {"description": "Invalid input or name already in use"},
            404: {"description": "Franchise not found"},
        },
    )
    def post(self, request: Request) -> Response:
        """Create an office."""
        return async_to_sync(self._handle_create)(request)

    async def _handle_create(self, request: Request) -> Response:
        """Async handler for create office."""
        with tracer.start_as_current_span("create_office") as span:
            span.set_attribute("operation", "create_office")

            serializer = OfficeRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            office = Office.create(
                name=serializer.validated_data.get("name"),
                franchise_id=serializer.validated_data.get("franchise_id"),
            )
            span.set_attribute("franchise.id", office.franchise_id)

            result = await _service().create_office(office)

            span.set_attribute("office.id", result.id)
            span.set_status(Status(StatusCode.OK))

            return Response(OfficeResponseSerializer(result).data, status=status.HTTP_201_CREATED)


class OfficeDetailView(APIView):
    """View for reading and replacing an office."""

    @extend_schema(
        operation_id="get_office",
        summary="Get Office",
        tags=["Offices"],
        responses={
            200: OfficeResponseSerializer,
            404: {"description": "Office not found"},
        },
    )
    def get(self, request: Request, office_id: int) -> Response:
        """Get an office."""
        return async_to_sync(self._handle_get)(request, office_id)

    async def _handle_get(self, _request: Request, office_id: int) -> Response:
        """Async handler for get office."""
        with tracer.start_as_current_span("get_office") as span:
            span.set_attribute("office.id", office_id)

            result = await _service().get_office(office_id)

            span.set_status(Status(StatusCode.OK))

            return Response(OfficeResponseSerializer(result).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_office",
        summary="Update Office",
        description=(
            "Replace an office. The id in the body must match the id in the path "
            "and the franchise cannot change."
        ),
        tags=["Offices"],
        request=OfficeRequestSerializer,
        responses={
            200: OfficeResponseSerializer,
            400: {"description": "Invalid input, name conflict, id mismatch or franchise change"},
            404: {"description": "Office not found"},
        },
    )
    def put(self, request: Request, office_id: int) -> Response:
        """Replace an office."""
        return async_to_sync(self._handle_update)(request, office_id)

    async def _handle_update(self, request: Request, office_id: int) -> Response:
        """Async handler for update office."""
        with tracer.start_as_current_span("update_office") as span:
            span.set_attribute("office.id", office_id)

            serializer = OfficeRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                return validation_error_response(serializer.errors)

            office = Office.create(
                name=serializer.validated_data.get("name"),
                franchise_id=serializer.validated_data.get("franchise_id"),
                office_id=serializer.validated_data.get("id"),
            )
            result = await _service().update_office(office_id, office)

            span.set_status(Status(StatusCode.OK))

            return Response(OfficeResponseSerializer(result).data, status=status.HTTP_200_OK)
