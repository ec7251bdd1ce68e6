# tests/sources/test_env_sources.py
"""
Testes das fontes de ambiente (`EnvSource`) e de arquivo `.env` (`DotEnvSource`).

Os testes asseguram que:
- chaves vazias ou em branco retornam falha
- valores ausentes ou em branco retornam falha (não exceção)
- `.env` ausente equivale a fonte vazia
"""

from pathlib import Path

import pytest

from confmgmt.sources.env import DotEnvSource, EnvSource, parse_env_lines


def test_env_source_reads_process_environment(monkeypatch):
    monkeypatch.setenv("CONFMGMT_TEST_VALUE", "from-env")

    result = EnvSource().try_get("CONFMGMT_TEST_VALUE")

    assert result.is_success
    assert result.value == "from-env"


def test_env_source_reads_at_lookup_time(monkeypatch):
    source = EnvSource()
    monkeypatch.setenv("CONFMGMT_LATE_VALUE", "late")

    assert source.try_get("CONFMGMT_LATE_VALUE").value == "late"


@pytest.mark.parametrize("key", ["", "   ", None])
def test_env_source_rejects_blank_keys(key):
    assert EnvSource(environ={"": "x"}).try_get(key).is_failure


def test_env_source_treats_blank_values_as_missing():
    source = EnvSource(environ={"BLANK": "  ", "SET": "1"})

    assert source.try_get("BLANK").is_failure
    assert source.try_get("ABSENT").is_failure
    assert source.try_get("SET").value == "1"


def test_parse_env_lines_handles_comments_quotes_and_export():
    text = """
# comentário
PLAIN=value
QUOTED="with spaces"
SINGLE='single'
export EXPORTED=yes
NO_EQUALS_SIGN
EQUALS=a=b
"""
    assert parse_env_lines(text) == {
        "PLAIN": "value",
        "QUOTED": "with spaces",
        "SINGLE": "single",
        "EXPORTED": "yes",
        "EQUALS": "a=b",
    }


def test_dotenv_source_reads_file(tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.write_text("STRING_EXAMPLE=from-dotenv\nEMPTY=\n", encoding="utf-8")

    source = DotEnvSource(env_file)

    assert source.try_get("STRING_EXAMPLE").value == "from-dotenv"
    assert source.try_get("EMPTY").is_failure
    assert source.try_get("MISSING").is_failure


def test_dotenv_missing_file_is_empty_source(tmp_path: Path):
    source = DotEnvSource(tmp_path / "does-not-exist.env")

    assert source.try_get("ANY").is_failure
