# src/typedconf/core/__init__.py
"""
Núcleo do leitor de configuração tipada.

Responsabilidades do pacote:
    - Tipos canônicos (ArgKind, LineKind, TypedValue)
    - Estágios puros de parse (classificação, diretivas, coerção)
    - Driver de parse e acesso tipado (ConfigParser)
    - Store congelável, hashing, exportação e carregamento em camadas

Princípios fundamentais:
    - Parse síncrono, sequencial e fail-fast
    - Erros tipados e semânticos
    - Nenhum estado global
"""

from .errors import (
    AccessError,
    ConfigFileNotFoundError,
    ConfigReadError,
    InvalidBooleanLiteralError,
    InvalidFloatLiteralError,
    InvalidIntegerLiteralError,
    InvalidLiteralError,
    LayerKindConflictError,
    MalformedAssignmentError,
    MissingKeyError,
    NoTypeDeclaredError,
    ParseError,
    StoreFrozenError,
    TypedConfigError,
    TypeMismatchError,
    UnknownTypeDirectiveError,
    UnrecognizedLineError,
)
from .export import dump_store
from .hashing import compute_store_hash
from .layering import load_layered, merge_stores
from .parser import ConfigParser, load_config
from .store import ConfigStore
from .types import ArgKind, LineKind, TypedValue

__all__ = [
    "AccessError",
    "ArgKind",
    "ConfigFileNotFoundError",
    "ConfigParser",
    "ConfigReadError",
    "ConfigStore",
    "InvalidBooleanLiteralError",
    "InvalidFloatLiteralError",
    "InvalidIntegerLiteralError",
    "InvalidLiteralError",
    "LayerKindConflictError",
    "LineKind",
    "MalformedAssignmentError",
    "MissingKeyError",
    "NoTypeDeclaredError",
    "ParseError",
    "StoreFrozenError",
    "TypeMismatchError",
    "TypedConfigError",
    "TypedValue",
    "UnknownTypeDirectiveError",
    "UnrecognizedLineError",
    "compute_store_hash",
    "dump_store",
    "load_config",
    "load_layered",
    "merge_stores",
]
