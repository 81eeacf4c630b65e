# src/typedconf/core/parsing/__init__.py
"""
Estágios puros do pipeline de parse.

Este pacote contém os três estágios que cooperam na leitura de um arquivo
de configuração tipada:
    - classifier → classifica cada linha crua
    - directives → resolve diretivas de tipo para o tipo corrente
    - coercion   → converte atribuições no valor tipado do tipo corrente

Invariantes:
    - Nenhum estágio mantém estado entre linhas
    - Nenhum estágio realiza I/O
    - Erros são levantados como exceções tipadas de `typedconf.core.errors`

O driver que encadeia os estágios vive em `typedconf.core.parser`.
"""

from .classifier import classify
from .coercion import coerce, split_assignment
from .directives import TYPE_DIRECTIVES, resolve_type

__all__ = [
    "TYPE_DIRECTIVES",
    "classify",
    "coerce",
    "resolve_type",
    "split_assignment",
]
