# tests/core/store/test_config_store.py
"""
Testes do ConfigStore.

Os testes asseguram que:
- atribuições repetidas sobrescrevem o valor anterior
- acessores verificam o tipo armazenado
- leituras são idempotentes e não mutam o store
- o store congelado rejeita mutações
"""

import pytest

from typedconf.core.errors import MissingKeyError, StoreFrozenError, TypeMismatchError
from typedconf.core.store import ConfigStore
from typedconf.core.types import ArgKind, TypedValue


def _store(**values: TypedValue) -> ConfigStore:
    store = ConfigStore()
    for name, value in values.items():
        store.put(name, value)
    return store


def test_put_and_get_with_python_types():
    store = _store(
        host=TypedValue(ArgKind.STRING, "localhost"),
        retries=TypedValue(ArgKind.INTEGER, 3),
        ratio=TypedValue(ArgKind.FLOAT, 0.5),
        verbose=TypedValue(ArgKind.BOOLEAN, False),
    )
    assert store.get("host", str) == "localhost"
    assert store.get("retries", int) == 3
    assert store.get("ratio", float) == 0.5
    assert store.get("verbose", bool) is False
    assert store.get("retries", "integer") == 3


def test_last_write_wins():
    store = _store(x=TypedValue(ArgKind.INTEGER, 1))
    store.put("x", TypedValue(ArgKind.STRING, "one"))
    assert len(store) == 1
    assert store.kind_of("x") is ArgKind.STRING
    assert store.get("x", ArgKind.STRING) == "one"


def test_missing_key():
    with pytest.raises(MissingKeyError) as excinfo:
        ConfigStore().get("absent", int)
    assert excinfo.value.name == "absent"
    assert "absent" in str(excinfo.value)


def test_type_mismatch_reports_name_and_kinds():
    """
    Verifica que solicitar um tipo diferente do armazenado gera TypeMismatchError.

    Invariantes:
        - O erro reporta nome, tipo esperado e tipo armazenado
        - O store permanece utilizável após o erro
    """
    store = _store(retries=TypedValue(ArgKind.INTEGER, 3))
    with pytest.raises(TypeMismatchError) as excinfo:
        store.get("retries", str)
    err = excinfo.value
    assert (err.name, err.expected, err.actual) == ("retries", "string", "integer")
    assert store.get("retries", int) == 3


def test_bool_is_not_accepted_as_integer():
    store = _store(flag=TypedValue(ArgKind.BOOLEAN, True))
    with pytest.raises(TypeMismatchError):
        store.get("flag", int)


def test_get_is_idempotent():
    store = _store(host=TypedValue(ArgKind.STRING, "localhost"))
    before = store.to_dict()
    assert store.get("host", str) == store.get("host", str)
    assert store.to_dict() == before


def test_frozen_store_rejects_put():
    store = _store(x=TypedValue(ArgKind.INTEGER, 1)).freeze()
    assert store.frozen
    with pytest.raises(StoreFrozenError):
        store.put("y", TypedValue(ArgKind.INTEGER, 2))
    assert "y" not in store


def test_marker_cannot_be_stored():
    with pytest.raises(ValueError):
        ConfigStore().put("x", TypedValue.marker(ArgKind.INTEGER))


def test_unsupported_accessor_type():
    store = _store(x=TypedValue(ArgKind.INTEGER, 1))
    with pytest.raises(ValueError):
        store.get("x", list)


def test_unknown_accessor_name_has_consistent_message():
    store = _store(x=TypedValue(ArgKind.INTEGER, 1))
    with pytest.raises(ValueError, match="Tipo de acessor não suportado"):
        store.get("x", "int")


def test_to_dict_and_names_are_sorted():
    store = _store(
        b=TypedValue(ArgKind.INTEGER, 2),
        a=TypedValue(ArgKind.STRING, "x"),
    )
    assert store.names() == ["a", "b"]
    assert store.to_dict() == {
        "a": {"kind": "string", "value": "x"},
        "b": {"kind": "integer", "value": 2},
    }
