from django.urls import path

from app_cubication.kinds import ROW_KINDS
from app_cubication.views import rows_view, sika_config_view, summary_view

app_name = "app_cubication"

urlpatterns = [
    # Дозировки бетона
    path(
        "sika-config/",
        sika_config_view.SikaConfigListAPIView.as_view(),
        name="sika-config",
    ),
    path(
        "sika-config/<str:tipo>/",
        sika_config_view.SikaConfigDetailAPIView.as_view(),
        name="sika-config-detail",
    ),
]

# Строки и сводки: одинаковые маршруты для каждого вида
for slug, kind in ROW_KINDS.items():
    urlpatterns += [
        path(
            f"{slug}/",
            rows_view.RowListCreateAPIView.as_view(kind=kind),
            name=f"{slug}-rows",
        ),
        path(
            f"{slug}/<int:row_id>/",
            rows_view.RowDetailAPIView.as_view(kind=kind),
            name=f"{slug}-row-detail",
        ),
        path(
            f"{slug}/summary/",
            summary_view.CubicationSummaryAPIView.as_view(kind=kind),
            name=f"{slug}-summary",
        ),
    ]
