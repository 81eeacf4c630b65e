# tests/conftest.py
"""
Fixtures compartilhados para testes do typedconf.

Este módulo define fixtures reutilizáveis que fornecem conteúdos de arquivos
de configuração tipada, cobrindo os cinco tipos declaráveis, comentários,
linhas em branco e um par defaults/local para carregamento em camadas.

Decisões arquiteturais:
    - Conteúdos são fornecidos como string; cada teste decide se grava em
      `tmp_path` ou usa `ConfigParser.parse_lines`
    - Dados retornados são determinísticos e isolados

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são seguras para execução em paralelo
"""

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def sample_config_text() -> str:
    """
    Arquivo de configuração bem-formado usando todos os tipos escalares.

    Returns:
        str: Conteúdo com #int, #str, #bool, #float, comentários e linhas em branco.
    """
    return """\
// configuração de exemplo
#int
retries := 3
timeout := -15

#str
host := localhost
banner := hello := world

#bool
verbose := true
dry_run := false

#FLOAT
ratio := 0.25
limit := 1e3
"""


@pytest.fixture
def defaults_config_text() -> str:
    return """\
#int
retries := 3
workers := 4
#str
host := localhost
"""


@pytest.fixture
def local_config_text() -> str:
    return """\
#int
workers := 8
#bool
verbose := true
"""


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """
    Fábrica que grava um conteúdo de configuração em `tmp_path`.

    Returns:
        Callable[[str, str], Path]: função (conteúdo, nome) → caminho gravado.
    """

    def _write(content: str, name: str = "config.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
