# src/typedconf/core/parsing/coercion.py
"""
Coercer de valores: converte atribuições `<nome> := <valor>` em valores tipados.

O tipo corrente é recebido explicitamente a cada atribuição; o coercer não
mantém estado entre linhas e pode ser testado isoladamente.

Política de conversão (v1):
    - string  → valor literal, sem unescaping
    - integer → decimal com sinal opcional, limitado a 64 bits
    - float   → decimal/científico, `inf`, `infinity` ou `nan` (sem caixa)
    - boolean → apenas `true` ou `false` (sensível à caixa)
    - vector  → não implementado: a atribuição é aceita e nada é produzido

Invariantes:
    - Qualquer falha de conversão é fatal para o parse do arquivo
    - O nome do argumento é armazenado literalmente (após trim)

Limites explícitos:
    - Não armazena valores (responsabilidade do store)
    - Não interpreta diretivas ou comentários
"""

from __future__ import annotations

import re
from typing import Any, Callable, Dict, Optional, Tuple

from ..errors import (
    InvalidBooleanLiteralError,
    InvalidFloatLiteralError,
    InvalidIntegerLiteralError,
    MalformedAssignmentError,
    NoTypeDeclaredError,
)
from ..types import ArgKind, TypedValue
from .classifier import ASSIGNMENT_SEPARATOR

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_BOOLEANS = {"true": True, "false": False}


def split_assignment(line: str, line_no: int) -> Tuple[str, str]:
    """
    Separa uma atribuição na primeira ocorrência de `:=`.

    O valor pode conter `:=` adicionais, preservados literalmente.

    Returns:
        Tuple[str, str]: (nome, valor bruto), ambos sem espaços nas extremidades.

    Raises:
        MalformedAssignmentError: Se o separador estiver ausente ou se
            nome ou valor estiverem vazios.
    """
    name, sep, raw_value = line.partition(ASSIGNMENT_SEPARATOR)
    name = name.strip()
    raw_value = raw_value.strip()
    if not sep or not name or not raw_value:
        raise MalformedAssignmentError(line_no, line)
    return name, raw_value


def parse_string(raw: str, line_no: int) -> str:
    return raw


def parse_integer(raw: str, line_no: int) -> int:
    if not _INTEGER_RE.fullmatch(raw):
        raise InvalidIntegerLiteralError(line_no, raw)
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidIntegerLiteralError(line_no, raw)
    return value


def parse_float(raw: str, line_no: int) -> float:
    if not _FLOAT_RE.fullmatch(raw):
        raise InvalidFloatLiteralError(line_no, raw)
    return float(raw)


def parse_boolean(raw: str, line_no: int) -> bool:
    if raw not in _BOOLEANS:
        raise InvalidBooleanLiteralError(line_no, raw)
    return _BOOLEANS[raw]


# vector ausente de propósito: sintaxe de vetor não é definida
VALUE_PARSERS: Dict[ArgKind, Callable[[str, int], Any]] = {
    ArgKind.STRING: parse_string,
    ArgKind.INTEGER: parse_integer,
    ArgKind.FLOAT: parse_float,
    ArgKind.BOOLEAN: parse_boolean,
}


def coerce(
    current_type: Optional[ArgKind],
    line: str,
    line_no: int,
) -> Optional[Tuple[str, TypedValue]]:
    """
    Converte uma linha de atribuição no valor tipado do tipo corrente.

    Ordem de validação:
        1. Tipo corrente deve existir (NoTypeDeclaredError)
        2. A linha deve ser uma atribuição bem-formada (MalformedAssignmentError)
        3. O valor deve ser válido para o tipo corrente (Invalid*LiteralError)

    Args:
        current_type (Optional[ArgKind]): Tipo da diretiva mais recente, ou None.
        line (str): Linha crua da atribuição.
        line_no (int): Número da linha (1-based).

    Returns:
        Optional[Tuple[str, TypedValue]]: (nome, valor) ou None quando o tipo
        corrente é `vector`, cuja conversão não é suportada.
    """
    if current_type is None:
        raise NoTypeDeclaredError(line_no, line)

    name, raw_value = split_assignment(line, line_no)

    parser = VALUE_PARSERS.get(current_type)
    if parser is None:
        return None

    return name, TypedValue(kind=current_type, value=parser(raw_value, line_no))
