# src/typedconf/core/types.py
"""
Tipos canônicos do leitor de configuração tipada.

Este módulo define as estruturas e enums fundamentais compartilhados entre
o classificador de linhas, o rastreador de tipo, o coercer de valores e o
store final.

Componentes principais:
    - ArgKind    → enum dos tipos declaráveis (string, integer, float, boolean, vector)
    - LineKind   → enum de classificação de linhas do arquivo
    - TypedValue → valor tipado imutável (união etiquetada)

Invariantes:
    - Enums possuem valores textuais canônicos
    - TypedValue é imutável
    - Um TypedValue armazenado no store sempre possui payload presente

Limites explícitos:
    - Não lê arquivos
    - Não interpreta linhas
    - Não realiza coerção de valores
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class ArgKind(str, Enum):
    """
    Tipos declaráveis por diretivas no arquivo de configuração.

    Os valores são strings para facilitar:
        - serialização em JSON/YAML
        - mensagens de erro e payloads
        - inspeção via CLI

    Invariantes:
        - O valor textual do enum é estável e canônico
    """
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    VECTOR = "vector"


class LineKind(str, Enum):
    """Classificação efêmera de uma linha do arquivo (nunca persistida)."""
    TYPE_DIRECTIVE = "type_directive"
    ASSIGNMENT = "assignment"
    COMMENT = "comment"
    BLANK = "blank"


# tipo Python exposto por cada ArgKind nos acessores
PYTHON_TYPES = {
    str: ArgKind.STRING,
    int: ArgKind.INTEGER,
    float: ArgKind.FLOAT,
    bool: ArgKind.BOOLEAN,
}


def as_kind(expected: Any) -> ArgKind:
    """
    Normaliza o tipo solicitado por um acessor para um `ArgKind`.

    Aceita um `ArgKind`, seu valor textual (ex.: "integer") ou um dos tipos
    Python `str`, `int`, `float`, `bool`.

    Raises:
        ValueError: Se o tipo solicitado não corresponder a nenhum ArgKind.
    """
    if isinstance(expected, ArgKind):
        return expected
    if isinstance(expected, type) and expected in PYTHON_TYPES:
        return PYTHON_TYPES[expected]
    if isinstance(expected, str):
        try:
            return ArgKind(expected)
        except ValueError:
            raise ValueError(f"Tipo de acessor não suportado: {expected!r}") from None
    raise ValueError(f"Tipo de acessor não suportado: {expected!r}")


@dataclass(frozen=True)
class TypedValue:
    """
    Valor tipado imutável associado a um argumento.

    Representa uma união etiquetada: `kind` é a etiqueta e `value` o payload.
    Antes do parse, uma diretiva de tipo produz uma instância "vazia"
    (`value is None`) usada apenas como marcador de tipo.

    Campos:
        - kind: tipo declarado (ArgKind)
        - value: payload já convertido, ou None para marcadores

    Invariantes:
        - Uma instância nunca é alterada após criada
        - Valores armazenados no store sempre possuem payload presente
    """
    kind: ArgKind
    value: Optional[Any] = None

    @classmethod
    def marker(cls, kind: ArgKind) -> "TypedValue":
        return cls(kind=kind)

    @property
    def is_marker(self) -> bool:
        return self.value is None

    def to_dict(self) -> dict:
        return {"kind": self.kind.value, "value": self.value}
