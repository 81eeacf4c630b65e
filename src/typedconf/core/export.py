# src/typedconf/core/export.py
"""
Exportação do store carregado para inspeção.

Formatos suportados (v1):
    - YAML (PyYAML, `safe_dump`)
    - JSON

A estrutura exportada é a de `ConfigStore.to_dict()`:

    retries:
      kind: integer
      value: 3
"""

from __future__ import annotations

import json
from typing import Any, Dict

import yaml  # PyYAML

from .errors import TypedConfigError

SUPPORTED_FORMATS = ("yaml", "json")


class UnsupportedExportFormatError(TypedConfigError):
    """Formato de exportação fora de `SUPPORTED_FORMATS`."""

    code = "UNSUPPORTED_EXPORT_FORMAT"
    hint = "Formatos suportados: yaml, json."


def render(data: Dict[str, Any], fmt: str = "yaml") -> str:
    fmt = fmt.lower()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=True, allow_unicode=True, default_flow_style=False)
    if fmt == "json":
        return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"
    raise UnsupportedExportFormatError(f"Formato não suportado: {fmt}")


def dump_store(parser: Any, fmt: str = "yaml") -> str:
    """
    Serializa o store de um parser (ou qualquer objeto com `to_dict()`).

    Raises:
        UnsupportedExportFormatError: Se o formato não for suportado.
    """
    return render(parser.to_dict(), fmt)
