import pytest

from personnel import main as main_module
from personnel.errors import InvalidArgument

EXPECTED_TRANSCRIPT = (
    "Nombre: Sebas, Edad: 35\n"
    "Feliz cumpleaños Sebas!, Ahora tienes 36 años.\n"
    "Nombre: Jesús, Edad: 30, Salario: 1200.00\n"
    "Nombre: Jesús, Edad: 30, Salario: 972.00\n"
    "Nombre: Ana, Edad: 27, Salario: 1156.00, Gerente\n"
)


def test_transcript(capsys):
    main_module.main()
    captured = capsys.readouterr()
    assert captured.out == EXPECTED_TRANSCRIPT


def test_invalid_construction_propagates(monkeypatch):
    original = main_module.Person

    def _broken_person(name, age):
        return original(name, -1)

    monkeypatch.setattr(main_module, "Person", _broken_person)
    with pytest.raises(InvalidArgument, match="negativa"):
        main_module.main()
