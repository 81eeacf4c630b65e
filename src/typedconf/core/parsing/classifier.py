# src/typedconf/core/parsing/classifier.py
"""
Classificador de linhas do arquivo de configuração.

Regras (avaliadas em ordem, a primeira que casar vence):
    1. Linha iniciada por `#`         → diretiva de tipo
    2. Linha iniciada por `//`        → comentário
    3. Linha vazia ou só com espaços  → linha em branco
    4. Linha contendo `:=`            → atribuição
    5. Caso contrário                 → UnrecognizedLineError

O teste de prefixo é feito sobre a linha crua: espaços à esquerda não são
removidos antes das regras 1 e 2.
"""

from __future__ import annotations

from ..errors import UnrecognizedLineError
from ..types import LineKind

DIRECTIVE_PREFIX = "#"
COMMENT_PREFIX = "//"
ASSIGNMENT_SEPARATOR = ":="


def classify(line: str, line_no: int) -> LineKind:
    """
    Classifica uma linha crua (sem quebra de linha final).

    Função pura: não depende de estado e não produz efeitos colaterais.

    Args:
        line (str): Conteúdo da linha.
        line_no (int): Número da linha (1-based), usado apenas em erros.

    Returns:
        LineKind: Classificação da linha.

    Raises:
        UnrecognizedLineError: Se a linha não casar com nenhuma regra.
    """
    if line.startswith(DIRECTIVE_PREFIX):
        return LineKind.TYPE_DIRECTIVE
    if line.startswith(COMMENT_PREFIX):
        return LineKind.COMMENT
    if line.strip() == "":
        return LineKind.BLANK
    if ASSIGNMENT_SEPARATOR in line:
        return LineKind.ASSIGNMENT
    raise UnrecognizedLineError(line_no, line)
