import pytest


@pytest.fixture(autouse=True)
def _clear_view_cache():
    # Кеш представлений общий для процесса; каждый тест начинает с чистого
    from django.core.cache import cache

    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client(db, django_user_model):
    from rest_framework.test import APIClient

    user = django_user_model.objects.create_user(username="jessenia", password="obra")
    client = APIClient()
    client.force_authenticate(user=user)
    return client


@pytest.fixture
def volcanita_item(db):
    from app_budget.models import Item

    return Item.objects.create(
        name="Volcanita Standard 10mm (1.2x2.4)",
        unit_price=9392,
        category="materiales",
    )
