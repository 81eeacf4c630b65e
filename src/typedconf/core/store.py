# src/typedconf/core/store.py
"""
Store de configuração: mapa de nome de argumento para valor tipado.

O store é criado vazio no início do parse, preenchido incrementalmente a
cada atribuição e congelado ao término. Após congelado, qualquer mutação
levanta `StoreFrozenError`.

Invariantes:
    - Chaves são únicas; atribuições repetidas sobrescrevem (last-write-wins)
    - Todo valor armazenado possui payload presente
    - Leituras nunca mutam o store

Limites explícitos:
    - Não interpreta linhas nem converte valores
    - Não lê arquivos
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Tuple

from .errors import MissingKeyError, StoreFrozenError, TypeMismatchError
from .types import ArgKind, TypedValue, as_kind


class ConfigStore:
    """
    Mapa nome → TypedValue pertencente a um único parser.

    Decisões arquiteturais:
        - Chamadores recebem acessores tipados, nunca o dicionário interno
        - O payload é devolvido por valor; o valor armazenado não é afetado
    """

    def __init__(self) -> None:
        self._entries: Dict[str, TypedValue] = {}
        self._frozen = False

    # -----------------------------
    # Escrita (apenas durante o parse)
    # -----------------------------

    def put(self, name: str, value: TypedValue) -> None:
        if self._frozen:
            raise StoreFrozenError(f"Store congelado; não é possível definir {name!r}")
        if value.is_marker:
            raise ValueError(f"Valor sem payload não pode ser armazenado: {name!r}")
        self._entries[name] = value

    def freeze(self) -> "ConfigStore":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -----------------------------
    # Leitura
    # -----------------------------

    def lookup(self, name: str) -> TypedValue:
        if name not in self._entries:
            raise MissingKeyError(name)
        return self._entries[name]

    def get(self, name: str, expected: Any) -> Any:
        """
        Retorna o payload de `name` verificando o tipo armazenado.

        Args:
            name (str): Nome do argumento.
            expected: ArgKind, seu valor textual ou um dos tipos
                `str`, `int`, `float`, `bool`.

        Raises:
            MissingKeyError: Se o argumento não existir.
            TypeMismatchError: Se o tipo armazenado diferir do solicitado.
        """
        kind = as_kind(expected)
        stored = self.lookup(name)
        if stored.kind is not kind:
            raise TypeMismatchError(name, kind.value, stored.kind.value)
        return stored.value

    def kind_of(self, name: str) -> ArgKind:
        return self.lookup(name).kind

    def names(self) -> List[str]:
        return sorted(self._entries)

    def items(self) -> Iterator[Tuple[str, TypedValue]]:
        return iter(sorted(self._entries.items()))

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: value.to_dict() for name, value in self.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ConfigStore({self.to_dict()!r})"
