# src/typedconf/core/parser.py
"""
Driver do parse de arquivos de configuração tipada.

Este módulo define o `ConfigParser`, responsável por ler um arquivo linha a
linha, encadear os estágios puros de `typedconf.core.parsing` e manter o
store resultante.

Máquina de estados:
    Start → (leitura de linhas) → Done

    | LineKind       | Ação                                         |
    |----------------|----------------------------------------------|
    | TYPE_DIRECTIVE | resolve_type → novo tipo corrente            |
    | ASSIGNMENT     | coerce(tipo corrente, linha) → store         |
    | COMMENT/BLANK  | nenhuma                                      |

Princípios fundamentais:
    - Leitura sequencial, síncrona e de passagem única
    - Qualquer erro interrompe o parse inteiro (fail-fast)
    - Cada parse constrói um store novo; nunca reaproveita um anterior

Observabilidade:
    - Eventos estruturados são acumulados em `events` (um dict por evento)
    - Avisos não fatais são acumulados em `warnings`

Invariantes:
    - Após um parse com falha, nenhum store parcial permanece acessível
    - Após um parse bem-sucedido, o store está congelado
    - O tipo corrente vive apenas durante o parse

Limites explícitos:
    - Não valida esquema além dos cinco tipos declaráveis
    - Não interpreta valores de vetor
    - Não realiza merge entre arquivos (ver `typedconf.core.layering`)
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .errors import ConfigFileNotFoundError, ConfigReadError, ParseError
from .hashing import compute_store_hash
from .parsing import classify, coerce, resolve_type
from .parsing.classifier import ASSIGNMENT_SEPARATOR
from .store import ConfigStore
from .types import ArgKind, LineKind

MEMORY_SOURCE = "<memory>"


class ConfigParser:
    """
    Parser de configuração tipada e ponto de acesso ao store carregado.

    Uso típico:

        parser = ConfigParser().parse("config.txt")
        retries = parser.get_int("retries")

    Decisões arquiteturais:
        - `parse` retorna o próprio parser para permitir encadeamento
        - O store é exposto apenas via acessores tipados
        - Eventos seguem o formato {source, level, message, timestamp, ...}
    """

    def __init__(self) -> None:
        self._store: Optional[ConfigStore] = None
        self.source: Optional[str] = None
        self.events: List[Dict[str, Any]] = []
        self.warnings: List[str] = []

    @classmethod
    def from_store(cls, store: ConfigStore, source: str = MEMORY_SOURCE) -> "ConfigParser":
        """Cria um parser já carregado a partir de um store existente (congelado na adoção)."""
        parser = cls()
        parser._reset(source)
        parser._store = store.freeze()
        return parser

    # -----------------------------
    # Parse
    # -----------------------------

    def parse(self, filepath: Union[str, Path]) -> "ConfigParser":
        """
        Carrega e interpreta um arquivo de configuração.

        Args:
            filepath (Union[str, Path]): Caminho do arquivo (UTF-8).

        Returns:
            ConfigParser: O próprio parser, com o store populado.

        Raises:
            ConfigFileNotFoundError: Se o arquivo não existir.
            ConfigReadError: Se o arquivo não puder ser aberto ou lido.
            ParseError: Qualquer falha de classificação, tipo ou conversão.
        """
        path = Path(filepath)
        source = str(path)
        self._reset(source)
        try:
            with path.open("r", encoding="utf-8", newline="\n") as f:
                return self._run(f, source)
        except FileNotFoundError as exc:
            error = ConfigFileNotFoundError(source)
            self._fail(error, source)
            raise error from exc
        except (OSError, UnicodeDecodeError) as exc:
            error = ConfigReadError(source, type(exc).__name__)
            self._fail(error, source)
            raise error from exc

    def parse_lines(
        self,
        lines: Iterable[str],
        source: str = MEMORY_SOURCE,
    ) -> "ConfigParser":
        """Aplica o mesmo pipeline de `parse` a um iterável de linhas."""
        self._reset(source)
        return self._run(lines, source)

    def _reset(self, source: str) -> None:
        self._store = None
        self.source = source
        self.events = []
        self.warnings = []

    def _run(self, lines: Iterable[str], source: str) -> "ConfigParser":
        store = ConfigStore()
        current_type: Optional[ArgKind] = None

        try:
            for line_no, raw in enumerate(lines, start=1):
                line = raw.rstrip("\r\n")
                line_kind = classify(line, line_no)
                self.log(level="debug", message=line, line_no=line_no, line_kind=line_kind.value)

                if line_kind is LineKind.TYPE_DIRECTIVE:
                    current_type = resolve_type(line, line_no)
                    self.log(
                        level="info",
                        message="Tipo corrente alterado",
                        line_no=line_no,
                        kind=current_type.value,
                    )

                elif line_kind is LineKind.ASSIGNMENT:
                    result = coerce(current_type, line, line_no)
                    if result is None:
                        self._skip_vector(line, line_no)
                        continue
                    name, value = result
                    store.put(name, value)

        except ParseError as exc:
            self._fail(exc, source)
            raise

        self._store = store.freeze()
        self.log(
            level="info",
            message="Parse concluído",
            entries=len(store),
            store_hash=self.store_hash,
        )
        return self

    def _skip_vector(self, line: str, line_no: int) -> None:
        name = line.partition(ASSIGNMENT_SEPARATOR)[0].strip()
        message = f"Linha {line_no}: valor de vetor para {name!r} não suportado; argumento ignorado"
        self.warnings.append(message)
        self.log(level="warning", message=message, line_no=line_no, name=name, kind=ArgKind.VECTOR.value)

    def _fail(self, error: ParseError, source: str) -> None:
        self._store = None
        error.path = source
        self.log(level="error", message=error.message, error=error.to_dict())

    # -----------------------------
    # Logging
    # -----------------------------

    def log(self, *, level: str, message: str, **extra: Any) -> None:
        event = {
            "source": self.source,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    # -----------------------------
    # Acesso
    # -----------------------------

    @property
    def is_loaded(self) -> bool:
        return self._store is not None

    @property
    def store(self) -> ConfigStore:
        # parser sem parse (ou com parse falho) se comporta como store vazio
        if self._store is None:
            return ConfigStore().freeze()
        return self._store

    @property
    def store_hash(self) -> str:
        return compute_store_hash(self.to_dict())

    def get(self, name: str, expected: Any) -> Any:
        """
        Acesso tipado a um argumento.

        Raises:
            MissingKeyError: Se o argumento não existir.
            TypeMismatchError: Se o tipo armazenado diferir de `expected`.
        """
        return self.store.get(name, expected)

    def get_str(self, name: str) -> str:
        return self.get(name, ArgKind.STRING)

    def get_int(self, name: str) -> int:
        return self.get(name, ArgKind.INTEGER)

    def get_float(self, name: str) -> float:
        return self.get(name, ArgKind.FLOAT)

    def get_bool(self, name: str) -> bool:
        return self.get(name, ArgKind.BOOLEAN)

    def kind_of(self, name: str) -> ArgKind:
        return self.store.kind_of(name)

    def names(self) -> List[str]:
        return self.store.names()

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return self.store.to_dict()

    def __contains__(self, name: object) -> bool:
        return name in self.store

    def __len__(self) -> int:
        return len(self.store)

    def __repr__(self) -> str:
        return f"ConfigParser(source={self.source!r}, args={self.to_dict()!r})"


def load_config(filepath: Union[str, Path]) -> ConfigParser:
    """Atalho para `ConfigParser().parse(filepath)`."""
    return ConfigParser().parse(filepath)
