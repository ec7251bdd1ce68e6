# src/confmgmt/resolvers/__init__.py
"""Resolvers secundários concretos (protocolo `SecondaryResolver`)."""

from .secrets import (
    FILE_SCHEME,
    SECRET_SCHEME,
    FileSecretResolver,
    MappingSecretResolver,
    decompose_reference,
)

__all__ = [
    "FILE_SCHEME",
    "SECRET_SCHEME",
    "FileSecretResolver",
    "MappingSecretResolver",
    "decompose_reference",
]
