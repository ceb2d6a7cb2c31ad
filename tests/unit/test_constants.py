"""Tests for the constant catalogue."""

import pytest
import yaml
from pydantic import ValidationError

from mksa.constants import (
    DEFAULT_CATALOGUE_PATH,
    ConstantCatalogue,
    get_constant,
    load_catalogue,
    quantity,
)
from mksa.dimension import LENGTH, TIME, VELOCITY, Dimension
from mksa.errors import UnknownConstantError
from mksa.types.constant import Constant


class TestPackagedCatalogue:
    def test_packaged_file_exists(self):
        assert DEFAULT_CATALOGUE_PATH.exists()

    def test_size(self, catalogue):
        assert len(catalogue) == 104

    def test_entries_are_complete(self, catalogue):
        for c in catalogue:
            assert c.value > 0, c.name
            assert c.description, c.name
            assert len(c.dimension) == 4

    def test_speed_of_light(self, catalogue):
        c = catalogue.get("speed_of_light")
        assert c.value == 2.99792458e8
        assert c.unit == VELOCITY
        assert str(c.unit) == "[m / s]"

    def test_values_parse_as_floats(self, catalogue):
        for c in catalogue:
            assert isinstance(c.value, float)

    def test_unit_relations(self, catalogue):
        assert catalogue.get("speed_of_light").unit * TIME == catalogue.get("light_year").unit
        assert catalogue.get("light_year").unit / catalogue.get("speed_of_light").unit == TIME
        assert catalogue.get("speed_of_light").unit == catalogue.get("kilometers_per_hour").unit
        assert catalogue.get("speed_of_light").unit != catalogue.get("mass_proton").unit

    def test_vacuum_permittivity_render(self, catalogue):
        unit = catalogue.get("vacuum_permittivity").unit
        assert str(unit) == "[s^4 A^2 / m^3 kg]"

    def test_plancks_constant_is_action(self, catalogue):
        assert catalogue.get("plancks_constant_h").unit == Dimension(m=2, kg=1, s=-1)

    def test_vacuum_permeability_value(self, catalogue):
        assert catalogue.get("vacuum_permeability").value == pytest.approx(1.25663706144e-6)


class TestLookup:
    def test_case_insensitive(self, catalogue):
        assert catalogue.get("SPEED_OF_LIGHT") is catalogue.get("speed_of_light")
        assert catalogue.get("Speed of light") is catalogue.get("speed_of_light")
        assert "Light-Year" in catalogue

    def test_unknown_name(self, catalogue):
        with pytest.raises(UnknownConstantError) as exc_info:
            catalogue.get("warp_factor")
        assert exc_info.value.name == "warp_factor"
        assert "warp_factor" in str(exc_info.value)

    def test_unknown_is_key_error(self, catalogue):
        with pytest.raises(KeyError):
            catalogue.get("warp_factor")

    def test_contains_non_string(self, catalogue):
        assert 42 not in catalogue

    def test_with_dimension(self, catalogue):
        names = {c.name for c in catalogue.with_dimension(VELOCITY)}
        assert names == {"speed_of_light", "miles_per_hour", "kilometers_per_hour", "knot"}

    def test_names(self, catalogue):
        names = catalogue.names()
        assert names[0] == "speed_of_light"
        assert "gauss" in names


class TestQuantity:
    def test_foot(self):
        v = quantity(6.0, "foot")
        assert v.magnitude == pytest.approx(1.8288)
        assert v.dimension == LENGTH

    def test_constant_quantity_default_raw(self):
        v = get_constant("grav_accel").quantity()
        assert v.magnitude == 9.80665
        assert str(v.dimension) == "[m / s^2]"

    def test_light_year_travel_time(self, catalogue):
        t = catalogue.quantity(1.0, "light_year") / catalogue.quantity(1.0, "speed_of_light")
        assert t.dimension == TIME
        assert t.magnitude == pytest.approx(catalogue.get("day").value * 365.25, rel=1e-4)

    def test_speed_of_light_in_kmh(self, catalogue):
        c = catalogue.quantity(1.0, "speed_of_light")
        assert c.in_units(catalogue.get("kilometers_per_hour").value) == pytest.approx(
            1.079e9, abs=1e6
        )

    def test_half_speed_of_light_over_two_weeks(self, catalogue):
        d = catalogue.quantity(0.5, "speed_of_light") * catalogue.quantity(2.0, "week")
        assert d.dimension == LENGTH


class TestLoadCatalogue:
    def test_load_custom_file(self, small_catalogue_file):
        catalogue = load_catalogue(small_catalogue_file)
        assert len(catalogue) == 3
        assert catalogue.get("furlong").unit == LENGTH
        assert catalogue.get("stone").description == ""

    def test_furlongs_per_fortnight(self, small_catalogue_file):
        catalogue = load_catalogue(small_catalogue_file)
        v = catalogue.quantity(1.0, "furlong") / catalogue.quantity(1.0, "fortnight")
        assert v.dimension == VELOCITY
        assert v.magnitude == pytest.approx(201.168 / 1209600.0)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert len(load_catalogue(path)) == 0

    def test_bad_dimension_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.dump({
            "constants": {"oops": {"value": 1.0, "dimension": [1, 0, 0]}},
        }))
        with pytest.raises(ValidationError):
            load_catalogue(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalogue(tmp_path / "nope.yaml")

    def test_catalogue_from_models(self):
        catalogue = ConstantCatalogue([Constant(name="Cubit", value=0.4572, dimension=(1, 0, 0, 0))])
        assert "cubit" in catalogue
        assert catalogue.quantity(2.0, "CUBIT").magnitude == pytest.approx(0.9144)
