import pytest

pytestmark = pytest.mark.django_db


def test_api_requires_authentication(client):
    response = client.get("/api/v1/items/")
    assert response.status_code in (401, 403)


def test_item_crud(api_client):
    response = api_client.post(
        "/api/v1/items/",
        {"name": "Volcanita RH (Verde) 10mm", "unit_price": 15289},
        format="json",
    )
    assert response.status_code == 201
    assert response.data["ok"] is True
    item_id = response.data["item"]["id"]
    assert response.data["item"]["category"] == "materiales"

    response = api_client.patch(
        f"/api/v1/items/{item_id}/", {"local_price": 14990}, format="json"
    )
    assert response.status_code == 200
    assert response.data["item"]["local_price"] == 14990

    response = api_client.get("/api/v1/items/", {"q": "verde"})
    assert [i["id"] for i in response.data["items"]] == [item_id]

    assert api_client.delete(f"/api/v1/items/{item_id}/").status_code == 200
    response = api_client.get(f"/api/v1/items/{item_id}/")
    assert response.status_code == 404
    assert response.data["ok"] is False


def test_item_delete_conflict(api_client, volcanita_item):
    api_client.post("/api/v1/expenses/", {"item_id": volcanita_item.id}, format="json")

    response = api_client.delete(f"/api/v1/items/{volcanita_item.id}/")

    assert response.status_code == 409
    assert response.data["error"].startswith("No puedes eliminar este item")


def test_expense_flow_and_overview(api_client, volcanita_item):
    response = api_client.post(
        "/api/v1/expenses/",
        {"item_id": volcanita_item.id, "quantity": 3, "room": "cocina", "floor": 1},
        format="json",
    )
    assert response.status_code == 201
    expense = response.data["expense"]
    assert expense["amount"] == 28176

    response = api_client.post(
        f"/api/v1/expenses/{expense['id']}/toggle-paid/",
        {"paid_by": "jessenia"},
        format="json",
    )
    assert response.data["expense"]["paid"] is True
    assert response.data["expense"]["paid_by"] == "jessenia"

    response = api_client.get("/api/v1/budget/overview/")
    assert response.status_code == 200
    assert response.data["budget"]["total_spent"] == 28176
    assert response.data["budget"]["total_paid"] == 28176
    assert response.data["by_floor"]["floor1"] == 28176
    paid = {c["id"]: c["paid"] for c in response.data["contributors"]}
    assert paid["jessenia"] == 28176

    response = api_client.post(
        f"/api/v1/expenses/{expense['id']}/quantity/", {"quantity": 1}, format="json"
    )
    assert response.data["expense"]["amount"] == 9392

    response = api_client.get("/api/v1/budget/overview/")
    assert response.data["budget"]["total_spent"] == 9392

    response = api_client.get("/api/v1/expenses/", {"room": "cocina", "floor": 1})
    assert len(response.data["expenses"]) == 1
    response = api_client.get(f"/api/v1/items/{volcanita_item.id}/expenses/")
    assert len(response.data["expenses"]) == 1


def test_expense_with_unknown_item_is_rejected(api_client):
    response = api_client.post("/api/v1/expenses/", {"item_id": 12345}, format="json")
    assert response.status_code == 400
    assert response.data["details"] == {"field": "item_id"}


def test_volcanita_rows_and_summary(api_client):
    response = api_client.post(
        "/api/v1/cubication/volcanita/",
        {"habitacion": "Baño", "ancho": 4, "tipo_volcanita": "RH"},
        format="json",
    )
    assert response.status_code == 201
    row = response.data["row"]
    assert row["planchas_requeridas"] == 4

    response = api_client.patch(
        f"/api/v1/cubication/volcanita/{row['id']}/", {"ancho": 8}, format="json"
    )
    assert response.data["row"]["planchas_requeridas"] == 7

    response = api_client.get("/api/v1/cubication/volcanita/summary/", {"RH": 10000})
    assert response.status_code == 200
    assert response.data["total_price"] == 70000
    assert "RH (Humedad)" in response.data["text"]["concise"]

    response = api_client.get("/api/v1/cubication/volcanita/summary/", {"RH": "caro"})
    assert response.status_code == 400

    response = api_client.delete("/api/v1/cubication/volcanita/")
    assert response.data["deleted"] == 1
    assert api_client.get("/api/v1/cubication/volcanita/").data["rows"] == []


def test_cubication_row_not_found(api_client):
    response = api_client.get("/api/v1/cubication/insulation/999/")
    assert response.status_code == 404


def test_sika_rows_require_tipo(api_client):
    response = api_client.post("/api/v1/cubication/sika/", {"name": "Zapata"}, format="json")
    assert response.status_code == 400
    assert response.data["details"] == {"field": "tipo"}


def test_sika_config_endpoints(api_client):
    response = api_client.get("/api/v1/cubication/sika-config/radier/")
    assert response.status_code == 200
    assert response.data["config"]["cement"] == pytest.approx(11.12)

    response = api_client.patch(
        "/api/v1/cubication/sika-config/zapata/", {"waste": 12}, format="json"
    )
    assert response.data["config"]["waste"] == pytest.approx(12)

    response = api_client.get("/api/v1/cubication/sika-config/")
    assert [c["tipo"] for c in response.data["configs"]] == ["radier", "zapata"]

    response = api_client.get("/api/v1/cubication/sika-config/losa/")
    assert response.status_code == 400


def test_row_body_must_be_an_object(api_client):
    response = api_client.post("/api/v1/cubication/sika/", [1, 2], format="json")
    assert response.status_code == 400

    row_id = api_client.post(
        "/api/v1/cubication/sika/", {"tipo": "zapata"}, format="json"
    ).data["row"]["id"]
    response = api_client.patch(
        f"/api/v1/cubication/sika/{row_id}/", "abc", format="json"
    )
    assert response.status_code == 400


def test_row_write_coerces_dimensions_and_checks_choices(api_client):
    response = api_client.post(
        "/api/v1/cubication/sika/",
        {"tipo": "radier", "qty": "2", "length": "3", "width": "0,4", "height": "abc"},
        format="json",
    )
    assert response.status_code == 201
    assert response.data["row"]["qty"] == 2
    assert response.data["row"]["area"] == pytest.approx(2.4)
    assert response.data["row"]["volume"] == 0

    response = api_client.post(
        "/api/v1/cubication/volcanita/", {"tipo_volcanita": "OSB"}, format="json"
    )
    assert response.status_code == 400


def test_patch_missing_row_is_not_found(api_client):
    response = api_client.patch(
        "/api/v1/cubication/volcanita/999/", {"ancho": 3}, format="json"
    )
    assert response.status_code == 404


def test_overview_storage_failure_returns_user_message(api_client, monkeypatch):
    from django.db import DatabaseError

    from app_budget.repositories import ExpenseRepository

    def broken_list_all(self):
        raise DatabaseError("down")

    monkeypatch.setattr(ExpenseRepository, "list_all", broken_list_all)

    response = api_client.get("/api/v1/budget/overview/")

    assert response.status_code == 500
    assert response.data["error"] == "Error al obtener el resumen del presupuesto"
    assert "down" not in str(response.data)


def test_unexpected_error_does_not_leak_details(api_client, monkeypatch):
    from app_cubication.services import RowService

    def broken_list_rows(self):
        raise RuntimeError("secreto interno")

    monkeypatch.setattr(RowService, "list_rows", broken_list_rows)

    response = api_client.get("/api/v1/cubication/volcanita/")

    assert response.status_code == 500
    assert response.data == {"ok": False, "error": "Error interno", "details": {}}
