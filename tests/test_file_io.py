import json

import pandas as pd
import pytest

from address_tasks.file_io import AddressFileError, address_from_dict, read_addresses, write_errors
from address_tasks.validator import validate_address, validate_addresses


def test_read_nested_layout(resources_dir):
    addresses = read_addresses(resources_dir / "addresses.json")
    assert [a.id for a in addresses] == ["1", "2", "3"]

    first = addresses[0]
    assert first.type == "Physical Address"
    assert first.address_lines == ("Address 1", "Line 2")
    assert first.city == "City 1"
    assert first.province_or_state == "Eastern Cape"
    assert first.postal_code == "1234"
    assert first.country == "ZA"
    assert first.country_name == "South Africa"

    assert addresses[1].province_or_state is None
    assert addresses[2].province_or_state is None
    assert addresses[2].suburb_or_district == "Suburb 3"


def test_nested_layout_formatting(resources_dir):
    addresses = read_addresses(resources_dir / "addresses.json")
    assert [str(a) for a in addresses] == [
        "Physical Address: Address 1, Line 2 - City 1 - Eastern Cape - 1234 - South Africa",
        "Postal Address:  - City 2 -  - 2345 - Lebanon",
        "Business Address: Address 3 - City 3 -  - 3456 - South Africa",
    ]


def test_nested_layout_validation(resources_dir):
    results = validate_addresses(read_addresses(resources_dir / "addresses.json"))
    assert [r.codes for r in results] == [[], ["ADDRESS_LINES"], ["PROVINCE_ZA"]]


def test_read_flat_layout(resources_dir):
    addresses = read_addresses(resources_dir / "addresses_flat.json")
    assert len(addresses) == 5
    assert addresses[3].address_lines == ("1 Long St", None, "Floor 2")
    assert addresses[4].postal_code == ""
    assert addresses[4].city is None
    assert addresses[0].country_name is None


def test_postal_code_number_is_text():
    assert address_from_dict({"type": "x", "postalCode": 1234}).postal_code == "1234"
    assert address_from_dict({"type": "x", "postalCode": 1234.0}).postal_code == "1234"
    assert address_from_dict({"type": "x", "postalCode": "0012"}).postal_code == "0012"


def test_missing_fields_default_to_none():
    address = address_from_dict({})
    assert address.type == ""
    assert address.address_lines == (None, None)
    assert address.postal_code is None
    assert address.country is None


def test_country_object_without_code():
    address = address_from_dict({"type": "x", "country": {"name": "Lebanon"}})
    assert address.country == "Lebanon"
    assert address.country_name == "Lebanon"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_addresses(tmp_path / "missing.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(AddressFileError):
        read_addresses(path)


def test_top_level_not_array(tmp_path):
    path = tmp_path / "obj.json"
    path.write_text(json.dumps({"type": "x"}), encoding="utf-8")
    with pytest.raises(AddressFileError, match="array"):
        read_addresses(path)


def test_element_not_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text(json.dumps([{"type": "x"}, "oops"]), encoding="utf-8")
    with pytest.raises(AddressFileError, match="elemento 1"):
        read_addresses(path)


def test_write_errors(resources_dir, tmp_path):
    results = validate_addresses(read_addresses(resources_dir / "addresses_flat.json"))
    output = tmp_path / "errori.xlsx"
    write_errors(results, str(output))

    df = pd.read_excel(output, sheet_name="Errori")
    assert list(df.columns) == ["Posizione", "ID", "Indirizzo", "Regole", "Motivo"]
    assert df["Posizione"].tolist() == [2, 3, 5]
    assert df["Regole"].tolist() == [
        "POSTAL_CODE",
        "PROVINCE_ZA",
        "POSTAL_CODE, COUNTRY, ADDRESS_LINES",
    ]


def test_invalid_utf8(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'[{"type": "\xff"}]')
    with pytest.raises(AddressFileError, match="latin1.json"):
        read_addresses(path)


def test_utf8_bom_is_accepted(tmp_path):
    path = tmp_path / "bom.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps([{"type": "Casa"}]).encode("utf-8"))
    assert read_addresses(path)[0].type == "Casa"


@pytest.mark.parametrize("lines", [5, {}, True])
def test_address_lines_not_array(tmp_path, lines):
    path = tmp_path / "lines.json"
    path.write_text(
        json.dumps([{"type": "x", "addressLines": ["ok"]}, {"type": "x", "addressLines": lines}]),
        encoding="utf-8",
    )
    with pytest.raises(AddressFileError, match="elemento 1"):
        read_addresses(path)


def test_address_line_detail_not_object(tmp_path):
    path = tmp_path / "detail.json"
    path.write_text(json.dumps([{"type": "x", "addressLineDetail": "Via Roma 1"}]), encoding="utf-8")
    with pytest.raises(AddressFileError, match="elemento 0"):
        read_addresses(path)


def test_address_lines_single_string():
    assert address_from_dict({"type": "x", "addressLines": "Via Roma 1"}).address_lines == ("Via Roma 1",)


def test_code_and_name_are_text():
    address = address_from_dict(
        {
            "type": {"code": 5},
            "provinceOrState": {"code": 27, "name": ""},
            "country": {"code": 27, "name": 710},
        }
    )
    assert address.type == "5"
    assert address.province_or_state == "27"
    assert address.country == "27"
    assert address.country_name == "710"


def test_country_code_without_name_counts_as_present():
    address = address_from_dict(
        {"type": "x", "addressLines": ["1 Long St"], "postalCode": "1000",
         "provinceOrState": "Gauteng", "country": {"code": "ZA", "name": ""}}
    )
    assert address.country == "ZA"
    assert address.country_name == "ZA"
    assert validate_address(address).is_valid
