"""
Контроллер сводки кубикации.
"""

from drf_spectacular.utils import extend_schema

from app_cubication.kinds import RowKind
from core.api import BaseDomainAPIView

from .services import CubicationSummaryService, parse_price_overrides


class CubicationSummaryAPIView(BaseDomainAPIView):
    """
    API сводки по виду строк.

    **Endpoint:** GET /api/v1/cubication/<kind>/summary/

    Для insulation и volcanita цены можно переопределить параметрами
    запроса: ?muro_exterior=3000&RH=16000 (цена за м² или за плиту).

    **Response Format (insulation):**
    ```json
        {
            "ok": true,
            "kind": "insulation",
            "by_floor": {"floor1": {"area": 4.11}, "floor2": {"area": 0}, "total": {"area": 4.11}},
            "by_type": {"muro_exterior": {"area": 4.11, "price": 2964.0, "subtotal": 12182, ...}},
            "total_price": 12182,
            "text": {"concise": "...", "detailed": "..."}
        }
    ```
    """

    kind: RowKind = None

    @extend_schema(summary="Resumen de cubicación", tags=["Cubicación"])
    def get(self, request):
        try:
            overrides = parse_price_overrides(request.query_params, self.kind)
            return self.ok(CubicationSummaryService(self.kind).summary(overrides))
        except Exception as e:
            return self.handle_error(e)
