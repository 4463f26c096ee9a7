"""
Контроллеры дозировок бетона.
"""

from drf_spectacular.utils import extend_schema

from app_cubication.services import SikaConfigService
from core.api import BaseDomainAPIView

from .serializers import SikaConfigSerializer, SikaConfigUpdateSerializer


class SikaConfigListAPIView(BaseDomainAPIView):
    """API всех дозировок (отсутствующие создаются со значениями по умолчанию)."""

    @extend_schema(
        summary="Listar dosificaciones",
        responses={200: SikaConfigSerializer(many=True)},
        tags=["Cubicación"],
    )
    def get(self, request):
        try:
            configs = SikaConfigService().list_all()
            return self.ok({"configs": SikaConfigSerializer(configs, many=True).data})
        except Exception as e:
            return self.handle_error(e)


class SikaConfigDetailAPIView(BaseDomainAPIView):
    """API дозировки одного типа (radier / zapata)."""

    @extend_schema(
        summary="Obtener dosificación",
        responses={200: SikaConfigSerializer},
        tags=["Cubicación"],
    )
    def get(self, request, tipo: str):
        try:
            config = SikaConfigService().get_or_create_default(tipo)
            return self.ok({"config": SikaConfigSerializer(config).data})
        except Exception as e:
            return self.handle_error(e)

    @extend_schema(
        summary="Actualizar dosificación",
        request=SikaConfigUpdateSerializer,
        responses={200: SikaConfigSerializer},
        tags=["Cubicación"],
    )
    def patch(self, request, tipo: str):
        serializer = SikaConfigUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            config = SikaConfigService().update(tipo, serializer.validated_data)
            return self.ok({"config": SikaConfigSerializer(config).data})
        except Exception as e:
            return self.handle_error(e)
