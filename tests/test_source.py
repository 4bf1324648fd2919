import json
from pathlib import Path

import pytest
import yaml

from api_docs_gen.errors import SpecFormatError, SpecSourceError
from api_docs_gen.parser.detect import detect_encoding
from api_docs_gen.parser.source import acquire_spec, dump_spec, load_spec

FIXTURES = Path(__file__).parent / "fixtures"


class TestDetectEncoding:
    def test_detect_yaml_by_suffix(self):
        assert detect_encoding(FIXTURES / "petstore.yaml") == "yaml"

    def test_detect_json_by_suffix(self, tmp_path):
        assert detect_encoding(tmp_path / "openapi.json", text="") == "json"

    def test_sniff_json_content(self, tmp_path):
        f = tmp_path / "spec.txt"
        f.write_text('  {"openapi": "3.0.0"}')
        assert detect_encoding(f) == "json"

    def test_sniff_yaml_content(self, tmp_path):
        f = tmp_path / "spec"
        f.write_text("openapi: 3.0.0\n")
        assert detect_encoding(f) == "yaml"


class TestLoadSpec:
    def test_load_yaml(self):
        doc = load_spec(FIXTURES / "petstore.yaml")
        assert doc["info"]["title"] == "Swagger Petstore"
        assert "/pets" in doc["paths"]

    def test_missing_file_raises_source_error(self, tmp_path):
        with pytest.raises(SpecSourceError):
            load_spec(tmp_path / "missing.yaml")

    def test_malformed_json_raises_format_error(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_text('{"openapi": ')
        with pytest.raises(SpecFormatError):
            load_spec(f)

    def test_malformed_yaml_raises_format_error(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("paths: [unclosed\n")
        with pytest.raises(SpecFormatError):
            load_spec(f)

    def test_non_mapping_raises_format_error(self, tmp_path):
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(SpecFormatError):
            load_spec(f)

    def test_yaml_int_keys_and_dates_become_strings(self, tmp_path):
        f = tmp_path / "spec.yaml"
        f.write_text("info:\n  released: 2024-01-02\nresponses:\n  200:\n    description: ok\n")
        doc = load_spec(f)
        assert doc["info"]["released"] == "2024-01-02"
        assert "200" in doc["responses"]


class TestAcquireSpec:
    def test_yaml_converted_to_canonical_json(self, tmp_path):
        dest = tmp_path / "openapi.json"
        doc = acquire_spec(FIXTURES / "petstore.yaml", dest)

        assert dest.exists()
        assert json.loads(dest.read_text(encoding="utf-8")) == doc

    def test_roundtrip_matches_original_parse(self, tmp_path):
        dest = tmp_path / "nested" / "openapi.json"
        acquire_spec(FIXTURES / "petstore.yaml", dest)

        original = yaml.safe_load((FIXTURES / "petstore.yaml").read_text(encoding="utf-8"))
        assert load_spec(dest) == original

    def test_json_source_copied_verbatim(self, tmp_path):
        source = tmp_path / "source.json"
        source.write_text('{"openapi": "3.0.0", "paths": {}}', encoding="utf-8")
        dest = tmp_path / "out" / "openapi.json"

        acquire_spec(source, dest)
        assert dest.read_text(encoding="utf-8") == '{"openapi": "3.0.0", "paths": {}}'

    def test_unreadable_source_writes_nothing(self, tmp_path):
        dest = tmp_path / "openapi.json"
        with pytest.raises(SpecSourceError):
            acquire_spec(tmp_path / "missing.yaml", dest)
        assert not dest.exists()

    def test_malformed_source_writes_nothing(self, tmp_path):
        source = tmp_path / "bad.yaml"
        source.write_text("paths: [unclosed\n")
        dest = tmp_path / "openapi.json"
        with pytest.raises(SpecFormatError):
            acquire_spec(source, dest)
        assert not dest.exists()

    def test_same_source_and_dest(self, tmp_path):
        spec = tmp_path / "openapi.json"
        spec.write_text('{"openapi": "3.0.0"}', encoding="utf-8")
        assert acquire_spec(spec, spec) == {"openapi": "3.0.0"}


class TestDumpSpec:
    def test_keeps_key_order_and_unicode(self):
        text = dump_spec({"b": 1, "a": "café"})
        assert text.index('"b"') < text.index('"a"')
        assert "café" in text
        assert text.endswith("\n")
