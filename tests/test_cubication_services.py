import pytest

from app_cubication.kinds import INSULATION, SIKA, VOLCANITA
from app_cubication.models import SikaConfig, VolcanitaCalculation
from app_cubication.services import RowService, SikaConfigService
from app_cubication.views.summary_view.services import CubicationSummaryService
from core.exceptions import NotFoundError, ValidationError

pytestmark = pytest.mark.django_db


def test_new_volcanita_row_uses_defaults():
    row = RowService(VOLCANITA).create_row({})

    assert row.floor == 1
    assert row.alto == pytest.approx(2.4)
    assert row.tipo_superficie == "Pared"
    assert row.orientacion == "Norte"
    assert row.tipo_volcanita == "ST_TABIQUE"
    assert row.area_neto == 0
    assert row.planchas_requeridas == 0


def test_create_computes_derived_fields_before_insert():
    row = RowService(VOLCANITA).create_row({"habitacion": "Cocina", "ancho": 4})

    stored = VolcanitaCalculation.objects.get(pk=row.id)
    assert stored.area_neto == pytest.approx(9.6)
    assert stored.planchas_requeridas == 4


def test_update_recomputes_with_stored_dimensions():
    service = RowService(VOLCANITA)
    row = service.create_row({"ancho": 4, "alto": 2.4})

    row = service.update_row(row.id, {"ancho": 3})
    assert row.area_neto == pytest.approx(7.2)
    assert row.planchas_requeridas == 3

    stored = VolcanitaCalculation.objects.get(pk=row.id)
    assert stored.alto == pytest.approx(2.4)
    assert stored.area_neto == pytest.approx(7.2)


def test_update_with_same_dimensions_is_idempotent():
    service = RowService(INSULATION)
    row = service.create_row({})
    changes = {
        "ancho": 3,
        "alto": 2.4,
        "ancho_puerta": 0.9,
        "alto_puerta": 2.1,
        "ancho_ventana": 1.2,
        "alto_ventana": 1.0,
    }

    first = service.update_row(row.id, changes).area
    second = service.update_row(row.id, changes).area

    assert first == second
    assert first == pytest.approx(4.11)


def test_non_dimensional_update_keeps_derived_fields():
    service = RowService(VOLCANITA)
    row = service.create_row({"ancho": 4})

    row = service.update_row(row.id, {"habitacion": "Living", "tipo_volcanita": "RH"})
    assert row.planchas_requeridas == 4
    assert row.tipo_volcanita == "RH"


def test_insulation_surface_change_recomputes():
    service = RowService(INSULATION)
    row = service.create_row({"ancho": 4, "alto": 2.4, "largo": 3})
    assert row.area == pytest.approx(9.6)

    row = service.update_row(row.id, {"tipo_superficie": "Cielo"})
    assert row.area == pytest.approx(12.0)


def test_row_validation():
    with pytest.raises(ValidationError):
        RowService(VOLCANITA).create_row({"tipo_volcanita": "OSB"})
    with pytest.raises(ValidationError):
        RowService(INSULATION).create_row({"floor": 3})
    with pytest.raises(ValidationError):
        RowService(SIKA).create_row({"name": "Zapata 1"})


def test_row_data_must_be_an_object():
    service = RowService(SIKA)
    with pytest.raises(ValidationError) as exc:
        service.create_row([1, 2])
    assert exc.value.details == {"field": "data"}

    row = service.create_row({"tipo": "radier"})
    with pytest.raises(ValidationError):
        service.update_row(row.id, "abc")


def test_update_of_missing_row_is_not_found_before_validation():
    with pytest.raises(NotFoundError):
        RowService(VOLCANITA).update_row(999, {"tipo_volcanita": "OSB"})


def test_non_numeric_dimensions_become_zero():
    row = RowService(VOLCANITA).create_row({"ancho": "abc"})
    assert row.ancho == 0
    assert row.area_neto == 0


def test_concrete_row():
    service = RowService(SIKA)
    row = service.create_row({"tipo": "zapata", "qty": 2, "length": 3, "width": 0.4, "height": 0.1})

    assert row.name == "Nuevo"
    assert row.volume == pytest.approx(0.24)
    assert row.area == pytest.approx(2.4)

    row = service.update_row(row.id, {"qty": 1})
    assert row.volume == pytest.approx(0.12)


def test_delete_and_reset():
    service = RowService(SIKA)
    first = service.create_row({"tipo": "radier"})
    service.create_row({"tipo": "zapata"})

    service.delete_row(first.id)
    with pytest.raises(NotFoundError):
        service.get_row(first.id)
    with pytest.raises(NotFoundError):
        service.delete_row(first.id)

    assert service.reset() == 1
    assert service.list_rows() == []


def test_list_is_in_creation_order():
    service = RowService(VOLCANITA)
    ids = [service.create_row({"habitacion": name}).id for name in ("a", "b", "c")]
    assert [row.id for row in service.list_rows()] == ids


# ---------- Dosificación ----------


def test_get_or_create_default_creates_exactly_once():
    service = SikaConfigService()

    config = service.get_or_create_default("radier")
    assert config.cement == pytest.approx(11.12)
    assert config.sand == pytest.approx(55.6)
    assert config.gravel == pytest.approx(66.7)
    assert config.water == pytest.approx(16.7)
    assert config.sika_dosage == pytest.approx(2.0)
    assert config.sika_container == pytest.approx(18)
    assert config.waste == pytest.approx(10)

    again = service.get_or_create_default("radier")
    assert again.pk == config.pk
    assert again.updated_at == config.updated_at
    assert SikaConfig.objects.filter(tipo="radier").count() == 1


def test_zapata_defaults():
    config = SikaConfigService().get_or_create_default("zapata")
    assert (config.cement, config.sand, config.gravel, config.water, config.sika_dosage) == (
        pytest.approx(7.2),
        pytest.approx(57.6),
        pytest.approx(72.0),
        pytest.approx(18.0),
        pytest.approx(1.5),
    )


def test_update_is_upsert():
    service = SikaConfigService()

    created = service.update("zapata", {"waste": 15})
    assert created.waste == pytest.approx(15)
    assert created.cement == pytest.approx(7.2)

    updated = service.update("zapata", {"cement": 8})
    assert updated.pk == created.pk
    assert updated.cement == pytest.approx(8)
    assert updated.waste == pytest.approx(15)


def test_unknown_tipo_and_invalid_values():
    service = SikaConfigService()
    with pytest.raises(ValidationError):
        service.get_or_create_default("losa")
    with pytest.raises(ValidationError):
        service.update("radier", {"cement": "mucho"})
    with pytest.raises(ValidationError):
        service.update("radier", {"waste": -5})


def test_list_all_returns_both_types():
    assert [c.tipo for c in SikaConfigService().list_all()] == ["radier", "zapata"]


# ---------- Resumen ----------


def test_insulation_summary_with_price_override():
    RowService(INSULATION).create_row({"ancho": 10, "alto": 1})

    summary = CubicationSummaryService(INSULATION).summary({"muro_exterior": 3000})

    assert summary["by_floor"]["total"]["area"] == pytest.approx(10.0)
    assert summary["by_type"]["muro_exterior"]["subtotal"] == 30000
    assert summary["total_price"] == 30000
    assert "TOTAL PRECIO: $30.000" in summary["text"]["concise"]


def test_summary_reflects_mutations():
    service = RowService(VOLCANITA)
    summaries = CubicationSummaryService(VOLCANITA)

    assert summaries.summary()["by_floor"]["total"]["planchas_requeridas"] == 0
    service.create_row({"ancho": 4})
    assert summaries.summary()["by_floor"]["total"]["planchas_requeridas"] == 4


def test_concrete_summary_uses_stored_configs():
    SikaConfigService().update("radier", {"sika_container": 10})
    RowService(SIKA).create_row({"tipo": "radier", "length": 5, "width": 2, "height": 0.1})

    summary = CubicationSummaryService(SIKA).summary()

    assert summary["types"]["radier"]["volume"] == pytest.approx(1.0)
    assert summary["types"]["radier"]["materials"]["cement"] == 13
    # 10 m² × 2 kg × 1.1 = 22 kg → 3 bidones de 10 kg
    assert summary["sika"]["containers"] == 3
    assert summary["configs"]["zapata"]["cement"] == pytest.approx(7.2)
