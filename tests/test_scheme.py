"""
Unit tests for element identifiers, length specifications, data types and the scheme loading.
"""

import json
import pytest
from pydantic import ValidationError
from isocodec.lib.core.SchemeLoader import SchemeLoader
from isocodec.lib.data_models.ElementId import ElementId
from isocodec.lib.data_models.IsoScheme import IsoScheme
from isocodec.lib.data_models.LengthSpec import LengthSpec
from isocodec.lib.data_models.MtiList import MtiList
from isocodec.lib.enums.DataType import DataType
from isocodec.lib.exceptions.exceptions import InvalidLengthError, InvalidTypeError, UnknownElementError


class TestElementId:

    @pytest.mark.parametrize("name", ["DE3", "DE03", "DE003"])
    def test_name_forms_resolve_to_same_element(self, name):
        assert ElementId.from_name(name) == ElementId(number=3)

    def test_canonical_names(self):
        assert ElementId(number=3).name == "DE03"
        assert ElementId(number=44).name == "DE44"
        assert ElementId(number=105).name == "DE105"

    def test_slot_and_flags(self):
        assert ElementId.from_name("DE01").is_reserved
        assert ElementId.from_name("DE01").slot == 0
        assert ElementId.from_name("DE65").is_secondary
        assert not ElementId.from_name("DE64").is_secondary
        assert ElementId.from_slot(104).name == "DE105"

    def test_numeric_ordering(self):
        names = ["DE10", "DE2", "DE105", "DE44"]

        assert [element.name for element in sorted(map(ElementId.from_name, names))] == [
            "DE02", "DE10", "DE44", "DE105"
        ]

    @pytest.mark.parametrize("name", ["", "DE", "DE0", "DE129", "XX03", "de03", "DE1234"])
    def test_bad_names_rejected(self, name):
        with pytest.raises(UnknownElementError):
            ElementId.from_name(name)

    def test_usable_as_dict_key(self):
        values = {ElementId.from_name("DE3"): "123"}

        assert values[ElementId.from_name("DE03")] == "123"


class TestLengthSpec:

    def test_fixed(self):
        length = LengthSpec.from_string("6")

        assert length.is_fixed
        assert length.max_length == 6
        assert length.prefix_digits == 0

    @pytest.mark.parametrize("spec, prefix_digits, max_length", [
        (".9", 1, 9),
        ("..25", 2, 25),
        ("...999", 3, 999),
        ("....9999", 4, 9999),
    ])
    def test_variable(self, spec, prefix_digits, max_length):
        length = LengthSpec.from_string(spec)

        assert length.is_variable
        assert length.prefix_digits == prefix_digits
        assert length.max_length == max_length
        assert str(length) == spec

    def test_model_accepts_short_form(self):
        assert LengthSpec.model_validate("..25") == LengthSpec(prefix_digits=2, max_length=25)
        assert LengthSpec.model_validate(12) == LengthSpec(max_length=12)

    @pytest.mark.parametrize("spec", ["..5", ".25", "2.5", "LL25", "", "..."])
    def test_unknown_short_forms_rejected(self, spec):
        with pytest.raises(InvalidLengthError):
            LengthSpec.from_string(spec)

    def test_prefix_capacity_checked(self):
        with pytest.raises(ValidationError):
            LengthSpec(prefix_digits=2, max_length=100)


class TestDataType:

    @pytest.mark.parametrize("data_type, value", [
        (DataType.A, "Value for DE"),
        (DataType.N, "123.45"),
        (DataType.S, "!@#"),
        (DataType.AN, "Value 44.1"),
        (DataType.AS, "Value-44!"),
        (DataType.NS, "123-45"),
        (DataType.ANS, "Name/Location, 1"),
        (DataType.B, "0123456789ABCDEF"),
        (DataType.Z, ";4000001234562=2512?"),
    ])
    def test_compliant_values(self, data_type, value):
        assert data_type.is_compliant(value)

    @pytest.mark.parametrize("data_type, value", [
        (DataType.A, "Value 1"),
        (DataType.N, "12A"),
        (DataType.S, "ABC"),
        (DataType.AN, "Value-1"),
        (DataType.NS, "12A"),
        (DataType.B, "0a1b"),
    ])
    def test_non_compliant_values(self, data_type, value):
        assert not data_type.is_compliant(value)

    def test_from_tag(self):
        assert DataType.from_tag("ans") is DataType.ANS

    def test_unknown_tag(self):
        with pytest.raises(InvalidTypeError):
            DataType.from_tag("x+n")


class TestIsoScheme:

    def test_names_normalized(self):
        scheme = IsoScheme.model_validate({"DE3": {"Type": "n", "Length": "6"}})

        assert "DE03" in scheme
        assert "DE3" in scheme
        assert scheme.get_element("DE03").length == LengthSpec(max_length=6)

    def test_numeric_key_order(self):
        scheme = IsoScheme.model_validate({
            "DE10": {"Type": "n", "Length": "8"},
            "DE2": {"Type": "n", "Length": "..19"},
            "DE105": {"Type": "ans", "Length": "...999"},
        })

        assert scheme.element_names() == ["DE02", "DE10", "DE105"]

    def test_unknown_element_lookup(self, fixed_scheme):
        assert fixed_scheme.get_element("DE90") is None
        assert fixed_scheme.get_element("garbage") is None
        assert "DE90" not in fixed_scheme

    @pytest.mark.parametrize("elements", [
        {"DE01": {"Type": "b", "Length": "16"}},
        {"DE03": {"Type": "x", "Length": "6"}},
        {"DE03": {"Type": "n", "Length": "..6"}},
        {"DE200": {"Type": "n", "Length": "6"}},
    ])
    def test_invalid_schemes_rejected(self, elements):
        with pytest.raises(ValidationError):
            IsoScheme.model_validate(elements)


class TestSchemeLoader:

    def test_default_scheme(self, default_scheme):
        assert len(default_scheme) == 127
        assert default_scheme.get_element("DE02").length == LengthSpec(prefix_digits=2, max_length=19)
        assert default_scheme.get_element("DE44").data_type is DataType.AN
        assert default_scheme.get_element("DE105").length == LengthSpec(prefix_digits=3, max_length=999)

    def test_default_scheme_is_cached(self):
        assert SchemeLoader.default_scheme() is SchemeLoader.default_scheme()

    def test_default_mti_list(self):
        assert "0200" in SchemeLoader.default_mti_list()
        assert "0800" in SchemeLoader.default_mti_list()

    def test_custom_files(self):
        assert SchemeLoader.custom_scheme().get_element("DE44").length == LengthSpec(max_length=14)
        assert "0810" in SchemeLoader.custom_mti_list()

    def test_load_from_path(self, tmp_path):
        scheme_file = tmp_path / "scheme.json"
        mti_file = tmp_path / "mti.json"
        scheme_file.write_text(json.dumps({"DE03": {"Type": "n", "Length": "6"}}))
        mti_file.write_text(json.dumps(["0200", "0210"]))

        assert SchemeLoader.load_scheme(str(scheme_file)).element_names() == ["DE03"]
        assert SchemeLoader.load_mti_list(str(mti_file)) == ["0200", "0210"]

    def test_bad_mti_list_rejected(self):
        with pytest.raises(ValidationError):
            MtiList.model_validate(["0200", "20"])
