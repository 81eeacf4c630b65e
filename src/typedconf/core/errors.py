# src/typedconf/core/errors.py
"""
Exceções canônicas do leitor de configuração tipada.

Este módulo define a hierarquia oficial de exceções utilizadas durante a
leitura, interpretação e acesso tipado à configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de parse são tratados como falhas fatais para o arquivo inteiro
    - Erros de acesso são locais a uma chamada e não invalidam o store
    - Mensagens de erro são curtas e direcionadas ao usuário

Cada exceção expõe:
    - `code`: código estável do erro (não é texto livre)
    - `hint`: ação sugerida ao operador (onde corrigir)
    - `to_dict()`: payload serializável {type, message, details, hint}

Invariantes:
    - Todas as exceções herdam de `TypedConfigError`
    - Erros de parse reportam caminho, linha (1-based) e conteúdo
    - Erros de acesso reportam o nome solicitado e o conflito de tipo

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra eventos (responsabilidade do parser)
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class TypedConfigError(Exception):
    """
    Exceção base para todos os erros do leitor de configuração tipada.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - distinção clara entre falhas de parse e falhas de acesso
    """

    code = "TYPED_CONFIG_ERROR"
    hint: Optional[str] = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def details(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return {
            "type": self.code,
            "message": self.message,
            "details": self.details,
            "hint": self.hint,
        }


# ---------------------------------------------------------------------------
# Parse
# ---------------------------------------------------------------------------

class ParseError(TypedConfigError):
    """
    Exceção base para falhas durante o parse de um arquivo.

    O caminho do arquivo é anexado pelo driver do parser (`path`) antes de
    a exceção ser propagada; estágios puros (classificador, rastreador de
    tipo, coercer) conhecem apenas a linha e seu conteúdo.

    Invariantes:
        - Nenhum store parcial é considerado válido após esta exceção
    """

    code = "PARSE_ERROR"

    def __init__(
        self,
        message: str,
        *,
        line_no: Optional[int] = None,
        content: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.line_no = line_no
        self.content = content
        self.path = path

    @property
    def details(self) -> Dict[str, Any]:
        return {"path": self.path, "line_no": self.line_no, "content": self.content}

    def __str__(self) -> str:
        location = self.path or "<memory>"
        if self.line_no is not None:
            location = f"{location}:{self.line_no}"
        if self.content is None:
            return f"{location}: {self.message}"
        return f"{location}: {self.message}: {self.content!r}"


class UnrecognizedLineError(ParseError):
    """Linha não corresponde a diretiva, atribuição, comentário ou linha em branco."""

    code = "UNRECOGNIZED_LINE"
    hint = "Use '#<tipo>', '<nome> := <valor>', '// comentário' ou uma linha em branco."

    def __init__(self, line_no: int, content: str) -> None:
        super().__init__("Linha não reconhecida", line_no=line_no, content=content)


class UnknownTypeDirectiveError(ParseError):
    """Linha iniciada por `#` fora da tabela fixa de tipos."""

    code = "UNKNOWN_TYPE_DIRECTIVE"
    hint = "Tipos suportados: #int, #str, #string, #bool, #float, #vec."

    def __init__(self, line_no: int, content: str) -> None:
        super().__init__("Diretiva de tipo desconhecida", line_no=line_no, content=content)


class MalformedAssignmentError(ParseError):
    """Atribuição sem separador `:=` ou com nome/valor vazio."""

    code = "MALFORMED_ASSIGNMENT"
    hint = "Atribuições devem ter a forma '<nome> := <valor>' com ambos os lados preenchidos."

    def __init__(self, line_no: int, content: str) -> None:
        super().__init__("Atribuição malformada", line_no=line_no, content=content)


class NoTypeDeclaredError(ParseError):
    """Atribuição encontrada antes de qualquer diretiva de tipo."""

    code = "NO_TYPE_DECLARED"
    hint = "Declare o tipo (ex.: '#int') antes da primeira atribuição."

    def __init__(self, line_no: int, content: Optional[str] = None) -> None:
        super().__init__(
            "Atribuição sem diretiva de tipo precedente", line_no=line_no, content=content
        )


class InvalidLiteralError(ParseError):
    """
    Exceção base para valores que não podem ser convertidos no tipo declarado.

    Subclasses definem `kind_label`, usado na mensagem e no payload.
    """

    code = "INVALID_LITERAL"
    kind_label = "valor"

    def __init__(self, line_no: int, content: str) -> None:
        super().__init__(f"Literal {self.kind_label} inválido", line_no=line_no, content=content)


class InvalidIntegerLiteralError(InvalidLiteralError):
    code = "INVALID_INTEGER_LITERAL"
    kind_label = "inteiro"
    hint = "Inteiros são decimais com sinal opcional e cabem em 64 bits."


class InvalidFloatLiteralError(InvalidLiteralError):
    code = "INVALID_FLOAT_LITERAL"
    kind_label = "float"
    hint = "Floats aceitam notação decimal ou científica (ex.: 1.5, -2e3), inf e nan."


class InvalidBooleanLiteralError(InvalidLiteralError):
    code = "INVALID_BOOLEAN_LITERAL"
    kind_label = "booleano"
    hint = "Booleanos aceitam apenas 'true' ou 'false' (minúsculas)."


class ConfigFileNotFoundError(ParseError):
    """Arquivo de configuração não encontrado no caminho especificado."""

    code = "CONFIG_FILE_NOT_FOUND"
    hint = "Verifique o caminho do arquivo de configuração."

    def __init__(self, path: str) -> None:
        super().__init__("Arquivo de configuração não encontrado", path=path)


class ConfigReadError(ParseError):
    """Falha de I/O ao abrir ou ler o arquivo de configuração."""

    code = "CONFIG_READ_ERROR"
    hint = "Verifique permissões e a codificação (UTF-8) do arquivo."

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Falha ao ler arquivo de configuração ({reason})", path=path)
        self.reason = reason


# ---------------------------------------------------------------------------
# Acesso
# ---------------------------------------------------------------------------

class AccessError(TypedConfigError):
    """Exceção base para falhas de acesso tipado ao store."""

    code = "ACCESS_ERROR"


class MissingKeyError(AccessError):
    """Argumento solicitado não existe no store."""

    code = "MISSING_KEY"
    hint = "Declare o argumento no arquivo de configuração."

    def __init__(self, name: str) -> None:
        super().__init__(f"Argumento não encontrado: {name!r}")
        self.name = name

    @property
    def details(self) -> Dict[str, Any]:
        return {"name": self.name}


class TypeMismatchError(AccessError):
    """Tipo armazenado difere do tipo solicitado pelo acessor."""

    code = "TYPE_MISMATCH"
    hint = "Use o acessor correspondente ao tipo declarado no arquivo."

    def __init__(self, name: str, expected: str, actual: str) -> None:
        super().__init__(
            f"Tipo incompatível para {name!r}: esperado {expected}, armazenado {actual}"
        )
        self.name = name
        self.expected = expected
        self.actual = actual

    @property
    def details(self) -> Dict[str, Any]:
        return {"name": self.name, "expected": self.expected, "actual": self.actual}


# ---------------------------------------------------------------------------
# Store / camadas
# ---------------------------------------------------------------------------

class StoreFrozenError(TypedConfigError):
    """Tentativa de mutação de um store após o término do parse."""

    code = "STORE_FROZEN"


class LayerKindConflictError(TypedConfigError):
    """
    Conflito de tipo entre defaults e override para um mesmo argumento.

    Exemplo de conflito:
        - defaults: #int   retries := 3
        - local:    #str   retries := three

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """

    code = "LAYER_KIND_CONFLICT"
    hint = "Mantenha no override o mesmo tipo declarado nos defaults."

    def __init__(self, name: str, base_kind: str, override_kind: str) -> None:
        super().__init__(
            f"Conflito de tipo na chave {name!r}: {base_kind} vs {override_kind}"
        )
        self.name = name
        self.base_kind = base_kind
        self.override_kind = override_kind

    @property
    def details(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "base_kind": self.base_kind,
            "override_kind": self.override_kind,
        }
