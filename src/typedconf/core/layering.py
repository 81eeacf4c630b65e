# src/typedconf/core/layering.py
"""
Carregamento em camadas: defaults + override local.

A configuração efetiva é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Política de merge (v1):
    - nome ausente no override → valor dos defaults preservado
    - nome presente em ambos com o mesmo tipo → valor do override
    - nome presente em ambos com tipos diferentes → LayerKindConflictError
    - nome presente apenas no override → adicionado

Invariantes:
    - O arquivo de defaults é obrigatório
    - Overrides nunca mutam o store dos defaults
    - Nenhum merge parcial é produzido em caso de conflito

Limites explícitos:
    - Não aplica coerção entre tipos
    - Suporta exatamente duas camadas
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .errors import LayerKindConflictError
from .parser import ConfigParser
from .store import ConfigStore


def merge_stores(base: ConfigStore, override: ConfigStore) -> ConfigStore:
    """
    Combina dois stores produzindo um novo store congelado.

    Raises:
        LayerKindConflictError: Se um mesmo nome tiver tipos diferentes.
    """
    result = ConfigStore()

    for name, value in base.items():
        result.put(name, value)

    for name, value in override.items():
        if name in base:
            base_kind = base.kind_of(name)
            if base_kind is not value.kind:
                raise LayerKindConflictError(name, base_kind.value, value.kind.value)
        result.put(name, value)

    return result.freeze()


def load_layered(
    defaults_path: Union[str, Path],
    local_path: Optional[Union[str, Path]] = None,
) -> ConfigParser:
    """
    Carrega defaults e, se existir, o override local.

    Returns:
        ConfigParser: Parser cujo store é o resultado do merge.

    Raises:
        ConfigFileNotFoundError: Se o arquivo de defaults não existir.
        ParseError: Qualquer falha de parse em uma das camadas.
        LayerKindConflictError: Se ocorrer conflito de tipo entre camadas.
    """
    defaults = ConfigParser().parse(defaults_path)

    if local_path is None or not Path(local_path).exists():
        return defaults

    local = ConfigParser().parse(local_path)
    merged = merge_stores(defaults.store, local.store)

    layered = ConfigParser.from_store(merged, source=f"{defaults.source}+{local.source}")
    layered.events = defaults.events + local.events
    layered.warnings = defaults.warnings + local.warnings
    layered.log(level="info", message="Camadas combinadas", entries=len(merged), store_hash=layered.store_hash)
    return layered
