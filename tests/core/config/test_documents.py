# tests/core/config/test_documents.py
"""
Testes dos codecs de documento (YAML / JSON).

Os testes asseguram que:
- o codec é escolhido pelo sufixo do arquivo
- formatos não suportados geram erro explícito
- arquivos vazios são interpretados como dicionários vazios
- a raiz do documento deve ser um dicionário
- conteúdo malformado vira `ConfigReadError` (um OSError)
- timestamps YAML permanecem strings
- a escrita YAML é block style, preservando a ordem das chaves

Limites explícitos:
    - Não valida merge (ver test_merge.py)
"""

import json
from pathlib import Path

import pytest

from atlas_configstore.core.config.documents import (
    JsonCodec,
    YamlCodec,
    codec_for_path,
    read_document,
    write_document,
)
from atlas_configstore.core.errors import (
    ConfigReadError,
    ConfigWriteError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


@pytest.mark.parametrize(
    "name, codec_type",
    [("a.yaml", YamlCodec), ("a.yml", YamlCodec), ("A.YML", YamlCodec), ("a.json", JsonCodec)],
)
def test_codec_for_path(name, codec_type):
    assert isinstance(codec_for_path(Path(name)), codec_type)


@pytest.mark.parametrize("name", ["a.toml", "a", "a.ini"])
def test_unsupported_format_raises(name):
    with pytest.raises(UnsupportedConfigFormatError):
        codec_for_path(Path(name))


@pytest.mark.parametrize("codec", [YamlCodec(), JsonCodec()])
def test_empty_file_is_empty_dict(tmp_path: Path, codec):
    p = tmp_path / f"empty.{codec.name}"
    p.write_text("", encoding="utf-8")
    assert read_document(p, codec) == {}


def test_yaml_root_must_be_mapping(tmp_path: Path):
    p = tmp_path / "list.yml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError) as exc:
        read_document(p, YamlCodec())
    assert isinstance(exc.value, ConfigReadError)
    assert isinstance(exc.value, OSError)


def test_json_root_must_be_object(tmp_path: Path):
    p = tmp_path / "list.json"
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        read_document(p, JsonCodec())


@pytest.mark.parametrize(
    "name, content, codec",
    [
        ("bad.yml", "a: [1, 2\n", YamlCodec()),
        ("bad.json", "{\"a\": ", JsonCodec()),
    ],
)
def test_malformed_content_raises_read_error(tmp_path: Path, name, content, codec):
    p = tmp_path / name
    p.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigReadError):
        read_document(p, codec)


def test_missing_file_raises_read_error(tmp_path: Path):
    with pytest.raises(ConfigReadError):
        read_document(tmp_path / "missing.yml", YamlCodec())


def test_yaml_timestamps_stay_strings(tmp_path: Path):
    p = tmp_path / "dates.yml"
    p.write_text("created: 2024-01-02\nat: 2024-01-02 10:00:00\n", encoding="utf-8")
    data = read_document(p, YamlCodec())
    assert data == {"created": "2024-01-02", "at": "2024-01-02 10:00:00"}


def test_yaml_write_is_block_style_and_keeps_order(tmp_path: Path):
    p = tmp_path / "out.yml"
    write_document(p, {"zeta": {"b": 1, "a": [1, 2]}, "alpha": "ção"}, YamlCodec())
    text = p.read_text(encoding="utf-8")
    assert text == "zeta:\n  b: 1\n  a:\n  - 1\n  - 2\nalpha: ção\n"


def test_json_write_uses_indent(tmp_path: Path):
    p = tmp_path / "out.json"
    write_document(p, {"a": {"b": 1}}, JsonCodec(indent=4))
    text = p.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert '\n    "a": {' in text
    assert json.loads(text) == {"a": {"b": 1}}


def test_unserializable_data_does_not_touch_file(tmp_path: Path):
    p = tmp_path / "out.json"
    p.write_text('{"keep": true}\n', encoding="utf-8")
    with pytest.raises(ConfigWriteError):
        write_document(p, {"bad": object()}, JsonCodec())
    assert json.loads(p.read_text(encoding="utf-8")) == {"keep": True}


def test_write_to_missing_directory_raises_write_error(tmp_path: Path):
    with pytest.raises(ConfigWriteError):
        write_document(tmp_path / "nope" / "out.yml", {"a": 1}, YamlCodec())
