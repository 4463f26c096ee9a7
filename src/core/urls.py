from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="docs"),
    path("api/v1/", include("app_budget.urls")),
    path("api/v1/cubication/", include("app_cubication.urls")),
    path("admin/", admin.site.urls),
]

admin.site.site_header = "Presupuesto de obra"
admin.site.site_title = "Presupuesto de obra"
admin.site.index_title = "Catálogo, gastos y cubicaciones"
