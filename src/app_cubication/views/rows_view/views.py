"""
Контроллеры строк кубикации.

Один набор контроллеров на все виды строк: вид передаётся
через as_view(kind=...) в urls.py.
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status

from app_cubication.kinds import RowKind
from app_cubication.services import RowService
from core.api import BaseDomainAPIView

from .serializers import ROW_SERIALIZERS, ROW_WRITE_SERIALIZERS


class BaseRowAPIView(BaseDomainAPIView):
    """Базовый класс для API строк одного вида."""

    kind: RowKind = None

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.service = RowService(self.kind)

    def serialize(self, rows, many: bool = False):
        return ROW_SERIALIZERS[self.kind.slug](rows, many=many).data

    def validated_payload(self, request, partial: bool = False):
        serializer = ROW_WRITE_SERIALIZERS[self.kind.slug](
            data=request.data, partial=partial
        )
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data


class RowListCreateAPIView(BaseRowAPIView):
    """
    API списка, создания и сброса строк.

    **Endpoints:**
        GET    /api/v1/cubication/<kind>/
        POST   /api/v1/cubication/<kind>/
        DELETE /api/v1/cubication/<kind>/   (удалить все строки)
    """

    @extend_schema(summary="Listar filas", tags=["Cubicación"])
    def get(self, request):
        try:
            rows = self.service.list_rows()
            return self.ok({"rows": self.serialize(rows, many=True)})
        except Exception as e:
            return self.handle_error(e)

    @extend_schema(summary="Crear fila", tags=["Cubicación"])
    def post(self, request):
        payload = self.validated_payload(request)

        try:
            row = self.service.create_row(payload)
            return self.ok({"row": self.serialize(row)}, status_code=status.HTTP_201_CREATED)
        except Exception as e:
            return self.handle_error(e)

    @extend_schema(summary="Reiniciar filas", tags=["Cubicación"])
    def delete(self, request):
        try:
            return self.ok({"deleted": self.service.reset()})
        except Exception as e:
            return self.handle_error(e)


class RowDetailAPIView(BaseRowAPIView):
    """API одной строки."""

    @extend_schema(summary="Obtener fila", tags=["Cubicación"])
    def get(self, request, row_id: int):
        try:
            return self.ok({"row": self.serialize(self.service.get_row(row_id))})
        except Exception as e:
            return self.handle_error(e)

    @extend_schema(summary="Actualizar fila", tags=["Cubicación"])
    def patch(self, request, row_id: int):
        payload = self.validated_payload(request, partial=True)

        try:
            row = self.service.update_row(row_id, payload)
            return self.ok({"row": self.serialize(row)})
        except Exception as e:
            return self.handle_error(e)

    @extend_schema(summary="Eliminar fila", tags=["Cubicación"])
    def delete(self, request, row_id: int):
        try:
            self.service.delete_row(row_id)
            return self.ok()
        except Exception as e:
            return self.handle_error(e)
