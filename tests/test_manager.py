import io

import pytest

from donorbank.donor import Donor
from donorbank.manager import DonorManager
from donorbank.storage import DonorFile
from donorbank.ui import UserInterface


def make_manager(path, text, validator=None):
    out = io.StringIO()
    ui = UserInterface(io.StringIO(text), out)
    return DonorManager(path, ui, validator), out


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.txt"
    store = DonorFile(path)
    store.append(Donor(1, "Ana", "Calle 5", 3, "A+", "N1"))
    store.append(Donor(2, "Luis", "Carrera 9", 3, "O-", "N2"))
    store.append(Donor(3, "Eva", "Calle 7", 6, "A+", "N3"))
    return path


def test_register_donor_writes_to_file(tmp_path):
    path = tmp_path / "data.txt"
    manager, _ = make_manager(path, "1\nAna\nCalle 5\n3\nA+\nN1\n")
    donor = manager.register_donor()
    expected = Donor(1, "Ana", "Calle 5", 3, "A+", "N1")
    assert donor == expected
    assert DonorFile(path).load_all() == [expected]
    assert manager.donors == [expected]


def test_register_donor_repeats_until_number_is_valid(tmp_path):
    path = tmp_path / "data.txt"
    manager, out = make_manager(
        path, "4\nEva\nCalle\n2\nO+\nbad\nok-number\n", lambda n: n == "ok-number"
    )
    donor = manager.register_donor()
    assert donor.number == "ok-number"
    assert "Digita un numero de telefono valido" in out.getvalue()


def test_search_by_district(data_file):
    manager, _ = make_manager(data_file, "3\n\n\n\n")
    found = manager.search_and_display()
    assert [d.name for d in found] == ["Ana", "Luis"]


def test_search_with_filters(data_file):
    manager, out = make_manager(data_file, "3\nCalle\nA+\n\n")
    found = manager.search_and_display()
    assert [d.name for d in found] == ["Ana"]
    assert "Nombre: Ana" in out.getvalue()


def test_search_without_matches(data_file):
    manager, out = make_manager(data_file, "9\n\n\n\n")
    assert manager.search_and_display() == []
    assert "No se encontraron donantes con los criterios especificados." in out.getvalue()


def test_search_missing_file(tmp_path):
    manager, out = make_manager(tmp_path / "none.txt", "3\n\n\n\n")
    assert manager.search_and_display() == []
    assert "Error al abrir el archivo para leer." in out.getvalue()


def test_delete_confirmed(data_file):
    manager, _ = make_manager(data_file, "s\n")
    removed = manager.delete_donor("Luis")
    assert [d.name for d in removed] == ["Luis"]
    assert [d.name for d in DonorFile(data_file).load_all()] == ["Ana", "Eva"]


def test_delete_declined(data_file):
    manager, _ = make_manager(data_file, "n\n")
    assert manager.delete_donor("Luis") == []
    assert len(DonorFile(data_file).load_all()) == 3


def test_delete_unknown_name(data_file):
    manager, out = make_manager(data_file, "")
    assert manager.delete_donor("Nadie") == []
    assert "No se encontró ningún donante con el nombre Nadie" in out.getvalue()


def test_display_all(data_file):
    manager, out = make_manager(data_file, "\n")
    donors = manager.display_all_donors()
    assert donors == DonorFile(data_file).load_all()
    assert out.getvalue().count("Número de móvil: ") == len(donors)