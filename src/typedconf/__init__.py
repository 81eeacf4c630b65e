"""
typedconf: leitor de configuração tipada.

Lê arquivos de texto orientados a linha com diretivas de tipo (`#int`,
`#str`, `#bool`, `#float`, `#vec`) seguidas de atribuições `nome := valor`
e expõe os valores convertidos via acessores tipados.
"""

from .core import (
    ArgKind,
    ConfigParser,
    ParseError,
    AccessError,
    TypedConfigError,
    load_config,
    load_layered,
)

__version__ = "0.1.0"

__all__ = [
    "AccessError",
    "ArgKind",
    "ConfigParser",
    "ParseError",
    "TypedConfigError",
    "load_config",
    "load_layered",
]
