# src/typedconf/core/parsing/directives.py
"""
Rastreador de tipo: interpretação de diretivas `#<tipo>`.

A diretiva resolvida passa a ser o tipo corrente aplicado às atribuições
seguintes, substituindo qualquer tipo anterior. Diretivas não se aninham.
"""

from __future__ import annotations

from typing import Dict

from ..errors import UnknownTypeDirectiveError
from ..types import ArgKind

TYPE_DIRECTIVES: Dict[str, ArgKind] = {
    "#int": ArgKind.INTEGER,
    "#str": ArgKind.STRING,
    "#string": ArgKind.STRING,
    "#bool": ArgKind.BOOLEAN,
    "#float": ArgKind.FLOAT,
    "#vec": ArgKind.VECTOR,
}


def resolve_type(line: str, line_no: int) -> ArgKind:
    """
    Resolve uma linha de diretiva para o `ArgKind` correspondente.

    A comparação ignora caixa e espaços nas extremidades (`#INT  ` → INTEGER).

    Raises:
        UnknownTypeDirectiveError: Se a diretiva não estiver na tabela fixa.
    """
    kind = TYPE_DIRECTIVES.get(line.strip().lower())
    if kind is None:
        raise UnknownTypeDirectiveError(line_no, line)
    return kind
