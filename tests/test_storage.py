import json

import pytest

from donorbank.donor import Donor
from donorbank.storage import DonorFile, parse_validation_response


@pytest.fixture
def donors():
    return [
        Donor(1, "Ana", "Calle 1 Norte", 3, "O+", "111"),
        Donor(2, "Luis", "Carrera 9", 3, "A-", "222"),
        Donor(3, "Eva", "Calle 5", 6, "O+", "333"),
        Donor(4, "Ana", "Avenida 2", 1, "B+", "444"),
    ]


@pytest.fixture
def store(tmp_path, donors):
    donor_file = DonorFile(tmp_path / "data.txt")
    for donor in donors:
        donor_file.append(donor)
    return donor_file


def test_append_and_load_round_trip(store, donors):
    assert store.load_all() == donors


def test_file_contents_follow_line_format(store, donors):
    lines = store.path.read_text(encoding="utf-8").splitlines()
    assert lines == [donor.to_line() for donor in donors]


def test_iteration_matches_load_all(store):
    assert list(store) == store.load_all()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        DonorFile(tmp_path / "nope.txt").load_all()


def test_search_by_district_only(store, donors):
    assert store.search(3, "", "") == donors[:2]


def test_search_with_address_filter(store, donors):
    assert store.search(3, "Calle", "") == [donors[0]]


def test_search_with_blood_type_filter(store, donors):
    assert store.search(3, "", "A-") == [donors[1]]


def test_search_no_match(store):
    assert store.search(9, "", "") == []


def test_remove_confirmed(store, donors):
    found, removed = store.remove_by_name("Ana", lambda d: True)
    assert found is True
    assert removed == [donors[0], donors[3]]
    assert store.load_all() == [donors[1], donors[2]]


def test_remove_declined_keeps_donor(store, donors):
    found, removed = store.remove_by_name("Luis", lambda d: False)
    assert found is True
    assert removed == []
    assert store.load_all() == donors


def test_remove_selective_confirmation(store, donors):
    found, removed = store.remove_by_name("Ana", lambda d: d.donor_id == 4)
    assert removed == [donors[3]]
    assert store.load_all() == donors[:3]


def test_remove_not_found(store, donors):
    seen = []
    found, removed = store.remove_by_name("Nadie", seen.append)
    assert (found, removed, seen) == (False, [], [])
    assert store.load_all() == donors


def test_remove_leaves_no_temp_files(store, tmp_path, donors):
    found, removed = store.remove_by_name("Eva", lambda d: True)
    assert (found, removed) == (True, [donors[2]])
    assert [p.name for p in tmp_path.iterdir()] == ["data.txt"]


def test_remove_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        DonorFile(tmp_path / "nope.txt").remove_by_name("Ana", lambda d: True)


@pytest.mark.parametrize("flag, expected", [(True, "true"), (False, "false")])
def test_validation_response_boolean(flag, expected):
    assert parse_validation_response(json.dumps({"isValid": flag})) == expected


def test_validation_response_falls_back_to_clave():
    assert parse_validation_response('{"clave": "pendiente"}') == "pendiente"


def test_validation_response_non_bool_flag_uses_clave():
    text = '{"isValid": "yes", "clave": "otro"}'
    assert parse_validation_response(text) == "otro"


@pytest.mark.parametrize("text", ['{"foo": 1}', '{"clave": 5}', "[1, 2]", "no json"])
def test_validation_response_invalid(text):
    with pytest.raises(ValueError):
        parse_validation_response(text)