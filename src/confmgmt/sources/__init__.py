# src/confmgmt/sources/__init__.py
"""
Fontes de valores concretas.

Cada fonte satisfaz o protocolo `ValueSource` (`try_get(key) -> Result[str]`)
e é plugada no `ConfigRegistry` por injeção explícita. A ordem das fontes
no registry define a precedência.

Fontes disponíveis:
    - EnvSource      → variáveis de ambiente (consulta ao vivo)
    - DotEnvSource   → arquivo `.env` (lido uma vez)
    - FileSource     → arquivo YAML/JSON achatado em chaves `a:b:c`
    - MappingSource  → mapa em memória

Limites explícitos:
    - Fontes não convertem nem validam valores
    - "Não encontrado" é sempre `Result.fail`, nunca exceção
"""

from .env import DotEnvSource, EnvSource, parse_env_lines
from .file import FileSource, load_source_file
from .memory import MappingSource

__all__ = [
    "DotEnvSource",
    "EnvSource",
    "FileSource",
    "MappingSource",
    "load_source_file",
    "parse_env_lines",
]
