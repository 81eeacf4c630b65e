# tests/core/parsing/test_coercion.py
"""
Testes do coercer de valores.

Este módulo valida a conversão de atribuições `<nome> := <valor>` no valor
tipado do tipo corrente, recebido explicitamente a cada chamada.

Os testes asseguram que:
- o separador é dividido apenas na primeira ocorrência
- nome e valor vazios são rejeitados
- cada tipo aceita apenas sua gramática de literais
- valores válidos concordam com o parser nativo do tipo alvo
- vetores são aceitos sintaticamente e não produzem valor

Limites explícitos:
    - Não valida integração com o store
    - Não valida leitura de arquivos
"""

import math

import pytest

from typedconf.core.errors import (
    InvalidBooleanLiteralError,
    InvalidFloatLiteralError,
    InvalidIntegerLiteralError,
    MalformedAssignmentError,
    NoTypeDeclaredError,
)
from typedconf.core.parsing.coercion import INT64_MAX, INT64_MIN, coerce, split_assignment
from typedconf.core.types import ArgKind, TypedValue


def test_split_on_first_separator_only():
    assert split_assignment("banner := a := b", 1) == ("banner", "a := b")


def test_split_trims_both_sides():
    assert split_assignment("  host   :=   localhost  ", 1) == ("host", "localhost")


@pytest.mark.parametrize("line", ["host localhost", " := value", "name :=", "name :=    ", ":="])
def test_malformed_assignment(line):
    with pytest.raises(MalformedAssignmentError) as excinfo:
        split_assignment(line, 3)
    assert excinfo.value.line_no == 3
    assert excinfo.value.content == line


def test_no_type_declared():
    """
    Verifica que uma atribuição sem tipo corrente é rejeitada.

    A verificação de tipo ocorre antes da divisão da atribuição.
    """
    with pytest.raises(NoTypeDeclaredError) as excinfo:
        coerce(None, "x := 5", 1)
    assert excinfo.value.line_no == 1


def test_string_is_verbatim():
    name, value = coerce(ArgKind.STRING, r"path := C:\tmp\n  # not a comment", 1)
    assert name == "path"
    assert value == TypedValue(ArgKind.STRING, r"C:\tmp\n  # not a comment")


@pytest.mark.parametrize("raw", ["0", "42", "-7", "+7", "007", str(INT64_MAX), str(INT64_MIN)])
def test_integer_agrees_with_int(raw):
    _, value = coerce(ArgKind.INTEGER, f"n := {raw}", 1)
    assert value.kind is ArgKind.INTEGER
    assert value.value == int(raw)


@pytest.mark.parametrize(
    "raw",
    ["abc", "1.5", "1_000", "0x10", "1e3", "- 1", str(INT64_MAX + 1), str(INT64_MIN - 1), "٣"],
)
def test_invalid_integer(raw):
    with pytest.raises(InvalidIntegerLiteralError) as excinfo:
        coerce(ArgKind.INTEGER, f"n := {raw}", 9)
    assert excinfo.value.line_no == 9
    assert excinfo.value.content == raw


@pytest.mark.parametrize("raw", ["1.5", "-0.25", "3", "1.", ".5", "1e-3", "+2E10"])
def test_float_agrees_with_float(raw):
    _, value = coerce(ArgKind.FLOAT, f"f := {raw}", 1)
    assert value.kind is ArgKind.FLOAT
    assert value.value == float(raw)


def test_float_special_values():
    assert math.isinf(coerce(ArgKind.FLOAT, "f := inf", 1)[1].value)
    assert coerce(ArgKind.FLOAT, "f := -Infinity", 1)[1].value == float("-inf")
    assert math.isnan(coerce(ArgKind.FLOAT, "f := NaN", 1)[1].value)


@pytest.mark.parametrize("raw", ["abc", ".", "1.2.3", "1_0.5", "e5", "1e", "0x1p3"])
def test_invalid_float(raw):
    with pytest.raises(InvalidFloatLiteralError):
        coerce(ArgKind.FLOAT, f"f := {raw}", 1)


def test_boolean_literals():
    assert coerce(ArgKind.BOOLEAN, "a := true", 1)[1].value is True
    assert coerce(ArgKind.BOOLEAN, "b := false", 1)[1].value is False


@pytest.mark.parametrize("raw", ["yes", "True", "FALSE", "1", "0", "on"])
def test_boolean_is_case_sensitive(raw):
    with pytest.raises(InvalidBooleanLiteralError):
        coerce(ArgKind.BOOLEAN, f"flag := {raw}", 2)


def test_vector_produces_no_value():
    assert coerce(ArgKind.VECTOR, "v := 1,2,3", 1) is None


def test_vector_still_requires_well_formed_assignment():
    with pytest.raises(MalformedAssignmentError):
        coerce(ArgKind.VECTOR, "v :=", 1)
