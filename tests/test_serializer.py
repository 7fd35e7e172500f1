# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

import yaml

from distroindex.errors import DeserializerError, SerializerError
from distroindex.serializer.factory import DeserializerFactory, SerializerFactory, load_distro_index
from distroindex.serializer.json_deserializer import JSONDeserializer
from distroindex.serializer.json_serializer import JSONSerializer
from distroindex.serializer.util import json_serialize
from distroindex.serializer.yaml_deserializer import YAMLDeserializer
from distroindex.serializer.yaml_serializer import YAMLSerializer
from tests.util import DISTRIBUTION_JSON, DISTRIBUTION_YAML


class TestDeserializers(unittest.TestCase):

    def test_json(self):
        distro = JSONDeserializer().deserialize(DISTRIBUTION_JSON.read_text(encoding="utf-8"))
        self.assertEqual(len(distro.servers), 2)

    def test_json_bytes(self):
        distro = JSONDeserializer().deserialize(DISTRIBUTION_JSON.read_bytes())
        self.assertEqual(distro.version, "1.0.0")

    def test_yaml(self):
        distro = YAMLDeserializer().deserialize(DISTRIBUTION_YAML.read_text(encoding="utf-8"))
        module = distro.servers[0].modules[0]
        self.assertEqual(module.artifact.path, "modstore/com/example/thing/2.0/thing-2.0.jar")

    def test_invalid_json(self):
        with self.assertRaises(DeserializerError):
            JSONDeserializer().deserialize("{\"servers\": [")

    def test_not_a_mapping(self):
        with self.assertRaises(DeserializerError):
            JSONDeserializer().deserialize("[1, 2]")
        with self.assertRaises(DeserializerError):
            YAMLDeserializer().deserialize("- a\n- b\n")

    def test_structural_error(self):
        with self.assertRaises(DeserializerError):
            JSONDeserializer().deserialize("{\"servers\": [{\"id\": \"x\"}]}")


class TestSerializers(unittest.TestCase):

    def setUp(self):
        self.distro = load_distro_index(DISTRIBUTION_JSON)

    def test_json_reparses_equal(self):
        serialized = JSONSerializer().serialize(self.distro)
        self.assertTrue(serialized.endswith("\n"))
        self.assertEqual(JSONDeserializer().deserialize(serialized), self.distro)

    def test_yaml_reparses_equal(self):
        serialized = YAMLSerializer().serialize(self.distro)
        self.assertEqual(YAMLDeserializer().deserialize(serialized), self.distro)

    def test_field_names(self):
        data = json.loads(JSONSerializer().serialize(self.distro))
        server = data["servers"][0]
        self.assertEqual(server["minecraftVersion"], "1.12.2")
        self.assertTrue(server["mainServer"])
        forge = server["modules"][0]
        self.assertEqual(forge["artifact"]["MD5"], "3f23ed1ce4d5c9a9f3b0bf46e8dc4e2b")
        self.assertEqual(forge["required"], {"value": True, "def": True})
        self.assertEqual(len(forge["subModules"]), 2)
        self.assertNotIn("description", data["servers"][1])


    def test_json_unsupported_value(self):
        with self.assertRaises(SerializerError):
            json_serialize({"path": Path("options.txt")})


class TestFactories(unittest.TestCase):

    def test_suffixes(self):
        raw = DISTRIBUTION_JSON.read_text(encoding="utf-8")
        factory = DeserializerFactory()
        self.assertEqual(factory.deserialize(".JSON", raw), factory.deserialize("json", raw))
        with self.assertRaises(ValueError):
            factory.deserialize(".toml", raw)

        serialized = SerializerFactory().serialize(".yaml", factory.deserialize("json", raw))
        self.assertEqual(yaml.safe_load(serialized)["version"], "1.0.0")
        with self.assertRaises(ValueError):
            SerializerFactory().serialize(".ttl", factory.deserialize("json", raw))

    def test_load_yaml_file(self):
        distro = load_distro_index(str(DISTRIBUTION_YAML))
        self.assertEqual(distro.servers[0].id, "yaml-server")

    def test_load_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                load_distro_index(Path(tmp) / "distribution.json")
            with self.assertRaises(OSError):
                load_distro_index(tmp)


if __name__ == '__main__':
    unittest.main()
