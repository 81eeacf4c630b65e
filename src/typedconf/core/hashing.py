# src/typedconf/core/hashing.py
"""
Hashing canônico do store de configuração.

O hash gerado representa a identidade estrutural de uma configuração
carregada (nomes, tipos e valores) e permite comparar execuções ou detectar
alterações entre arquivos.

Política de hashing (v1):
    - Serialização JSON canônica de `ConfigStore.to_dict()`
    - Ordenação estável de chaves
    - Separadores compactos (sem espaços supérfluos)
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Stores equivalentes produzem o mesmo hash, independente da ordem de declaração
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def compute_store_hash(store_dict: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico de um store serializado.

    Args:
        store_dict (Dict[str, Any]): Saída de `ConfigStore.to_dict()`.

    Returns:
        str: Hash SHA-256 hexadecimal.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(store_dict, dict):
        raise TypeError(
            f"Store para hashing deve ser dict, recebido: {type(store_dict).__name__}"
        )

    # allow_nan: floats inf/nan são valores válidos no arquivo
    canonical_json = json.dumps(
        store_dict,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=True,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
