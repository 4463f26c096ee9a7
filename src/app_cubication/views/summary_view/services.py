"""
Сервис сводок кубикации.

Собирает строки вида, агрегирует их (этажи, типы, цены или материалы)
и формирует текст. Цены по умолчанию берутся из настроек, запрос может
их переопределить; дозировки бетона — из SikaConfig.
Результат кешируется до следующей мутации.
"""

from typing import Any, Dict, Mapping, Optional

from django.conf import settings

from app_cubication.kinds import INSULATION, SIKA, VOLCANITA, RowKind
from app_cubication.services import SIKA_CONFIG_FIELDS, RowService, SikaConfigService
from core.cache import cached_view
from core.validation import validate_number

from . import summaries
from .aggregators import PriceAggregator, RowAggregator, aggregate_concrete

# вид → (настройка с ценами, мера для цены, краткий текст, подробный текст)
PRICED_KINDS = {
    INSULATION.slug: (
        "INSULATION_PRICES_M2",
        "area",
        summaries.insulation_concise,
        summaries.insulation_detailed,
    ),
    VOLCANITA.slug: (
        "VOLCANITA_BOARD_PRICES",
        "planchas_requeridas",
        summaries.volcanita_concise,
        summaries.volcanita_detailed,
    ),
}


def parse_price_overrides(params: Mapping[str, Any], kind: RowKind) -> Dict[str, float]:
    """
    Цены из параметров запроса (только известные типы).

    Raises:
        ValidationError: цена не число или отрицательная
    """
    return {
        tag: validate_number(tag, params[tag], min_value=0)
        for tag in kind.type_values
        if tag in params
    }


class CubicationSummaryService:
    """
    Сводка по виду строк.

    Example:
        >>> CubicationSummaryService(INSULATION).summary({"muro_exterior": 3000})
        {'kind': 'insulation', 'by_floor': {...}, 'by_type': {...},
         'total_price': 30000, 'prices': {...}, 'text': {...}}
    """

    def __init__(
        self,
        kind: RowKind,
        row_service: RowService = None,
        config_service: SikaConfigService = None,
    ):
        self.kind = kind
        self.row_service = row_service or RowService(kind)
        self.config_service = config_service or SikaConfigService()

    def prices(self, overrides: Optional[Mapping[str, float]] = None) -> Dict[str, float]:
        setting_name = PRICED_KINDS[self.kind.slug][0]
        return {**getattr(settings, setting_name), **(overrides or {})}

    def summary(self, overrides: Optional[Mapping[str, float]] = None) -> Dict:
        if self.kind.slug == SIKA.slug:
            return cached_view("cubication:sika:summary", self.build_concrete_summary)

        prices = self.prices(overrides)
        key = ",".join(f"{tag}={prices[tag]}" for tag in sorted(prices))
        return cached_view(
            f"cubication:{self.kind.slug}:summary:{key}",
            lambda: self.build_priced_summary(prices),
        )

    def build_priced_summary(self, prices: Mapping[str, float]) -> Dict:
        _, measure, concise, detailed = PRICED_KINDS[self.kind.slug]
        rows = self.row_service.list_rows()

        by_type = PriceAggregator.priced_types(
            RowAggregator.totals_by_type(rows, self.kind), prices, measure
        )
        result = {
            "kind": self.kind.slug,
            "by_floor": RowAggregator.totals_by_floor(rows, self.kind),
            "by_type": by_type,
            "total_price": PriceAggregator.grand_total(by_type),
            "prices": dict(prices),
        }
        result["text"] = {
            "concise": concise(result),
            "detailed": detailed(result, rows),
        }
        return result

    def build_concrete_summary(self) -> Dict:
        configs = self.config_service.configs_by_tipo()
        rows = self.row_service.list_rows()

        result = {
            "kind": self.kind.slug,
            "totals": RowAggregator.totals_by_floor(rows, self.kind)["total"],
            **aggregate_concrete(rows, self.kind, configs),
            "configs": {
                tipo: {name: getattr(config, name) for name in SIKA_CONFIG_FIELDS}
                for tipo, config in configs.items()
            },
        }
        result["text"] = {
            "concise": summaries.sika_concise(result),
            "detailed": summaries.sika_detailed(result, rows, configs),
        }
        return result
