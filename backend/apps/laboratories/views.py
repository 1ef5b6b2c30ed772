"""
Views для лабораторий
"""
import logging

from rest_framework import permissions, status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.response import Response

from .filters import LaboratoryFilter, WrappedParamsFilterBackend
from .models import Laboratory
from .serializers import LaboratoryJSONAPISerializer, LaboratorySerializer
from .services import LaboratoryParams, LaboratoryService, ParameterMissing

logger = logging.getLogger(__name__)


class LaboratoryViewSet(viewsets.ModelViewSet):
    """
    CRUD лабораторий текущего пользователя.

    v1 - плоский JSON и обертка {"laboratories": [...]},
    v2 - документ {"data": ...} с фильтрацией и сортировкой списка.
    """

    queryset = Laboratory.objects.none()
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [WrappedParamsFilterBackend]
    filterset_class = LaboratoryFilter
    pagination_class = None

    def get_queryset(self):
        if getattr(self, 'swagger_fake_view', False):
            return Laboratory.objects.none()
        return LaboratoryService.list_for(self.request.user)

    @property
    def is_v1(self):
        return getattr(self.request, 'version', None) == 'v1'

    def get_serializer_class(self):
        """Выбор представления по версии API"""
        if self.is_v1:
            return LaboratorySerializer
        return LaboratoryJSONAPISerializer

    def filter_queryset(self, queryset):
        # Фильтры и сортировка доступны только для списка в v2
        if self.action != 'list' or self.is_v1:
            return queryset
        return super().filter_queryset(queryset)

    def get_object(self):
        lookup_url_kwarg = self.lookup_url_kwarg or self.lookup_field
        try:
            return LaboratoryService.get_for(self.request.user, self.kwargs[lookup_url_kwarg])
        except Laboratory.DoesNotExist:
            raise NotFound()

    def render_resource(self, laboratory):
        data = self.get_serializer(laboratory).data
        return data if self.is_v1 else {'data': data}

    def render_collection(self, laboratories):
        data = self.get_serializer(laboratories, many=True).data
        return {'laboratories': data} if self.is_v1 else {'data': data}

    def parameter_missing_response(self, exc):
        logger.info(f"Запрос {self.request.method} без параметра '{exc.param}'")
        return Response(
            {'errors': {exc.param: [str(exc)]}},
            status=status.HTTP_400_BAD_REQUEST
        )

    def list(self, request, *args, **kwargs):
        laboratories = self.filter_queryset(self.get_queryset())
        return Response(self.render_collection(laboratories))

    def retrieve(self, request, *args, **kwargs):
        return Response(self.render_resource(self.get_object()))

    def create(self, request, *args, **kwargs):
        try:
            params = LaboratoryParams.from_request_data(request.data)
        except ParameterMissing as exc:
            return self.parameter_missing_response(exc)

        result = LaboratoryService.create_for(request.user, params)
        if not result.success:
            return Response({'errors': result.errors}, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        return Response(self.render_resource(result.data), status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """PUT и PATCH одинаково обновляют только переданные поля"""
        laboratory = self.get_object()
        try:
            params = LaboratoryParams.from_request_data(request.data)
        except ParameterMissing as exc:
            return self.parameter_missing_response(exc)

        result = LaboratoryService.update_for(request.user, laboratory, params)
        if not result.success:
            return Response({'errors': result.errors}, status=status.HTTP_422_UNPROCESSABLE_ENTITY)

        return Response(self.render_resource(result.data))

    def destroy(self, request, *args, **kwargs):
        laboratory = self.get_object()
        LaboratoryService.destroy(request.user, laboratory)
        return Response(status=status.HTTP_204_NO_CONTENT)
