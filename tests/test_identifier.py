# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations

import unittest

from distroindex.model.identifier import PLACEHOLDER, MavenIdentifier
from distroindex.model.module_type import ModuleType


class TestModuleType(unittest.TestCase):

    def test_default_extension(self):
        for module_type in (ModuleType.LIBRARY, ModuleType.FORGE_HOSTED, ModuleType.LITE_LOADER, ModuleType.FORGE_MOD,
                            ModuleType.FILE):
            self.assertEqual(module_type.default_extension(), "jar")
        self.assertEqual(ModuleType.LITE_MOD.default_extension(), "litemod")

    def test_root_dir(self):
        self.assertEqual(ModuleType.LIBRARY.root_dir(), "libraries")
        self.assertEqual(ModuleType.FORGE_HOSTED.root_dir(), "libraries")
        self.assertEqual(ModuleType.LITE_LOADER.root_dir(), "libraries")
        self.assertEqual(ModuleType.FORGE_MOD.root_dir(), "modstore")
        self.assertEqual(ModuleType.LITE_MOD.root_dir(), "modstore")
        self.assertEqual(ModuleType.FILE.root_dir(), "")

    def test_parse(self):
        self.assertIs(ModuleType.parse("ForgeMod"), ModuleType.FORGE_MOD)
        self.assertIsNone(ModuleType.parse("forgemod"))
        self.assertIsNone(ModuleType.parse(None))


class TestMavenIdentifier(unittest.TestCase):

    def test_full_coordinates(self):
        ident = MavenIdentifier.parse("org.ow2.asm:asm-all:5.2", ModuleType.LIBRARY)
        self.assertEqual(ident.group, "org.ow2.asm")
        self.assertEqual(ident.artifact_id, "asm-all")
        self.assertEqual(ident.version, "5.2")
        self.assertEqual(ident.extension, "jar")
        self.assertTrue(ident.is_valid)

    def test_type_default_extension(self):
        ident = MavenIdentifier.parse("com.mumfrey:macros:0.15.4", ModuleType.LITE_MOD)
        self.assertEqual(ident.extension, "litemod")

    def test_explicit_extension_wins(self):
        for module_type in ModuleType:
            ident = MavenIdentifier.parse("g:a:v@zip", module_type)
            self.assertEqual(ident.extension, "zip")
            self.assertEqual(ident.version, "v")

    def test_empty_explicit_extension(self):
        ident = MavenIdentifier.parse("g:a:v@", ModuleType.LITE_MOD)
        self.assertEqual(ident.extension, "litemod")

    def test_missing_version(self):
        with self.assertLogs("distroindex.identifier", level="WARNING") as logs:
            ident = MavenIdentifier.parse("g:a", ModuleType.LIBRARY)
        self.assertEqual((ident.group, ident.artifact_id, ident.version), ("g", "a", PLACEHOLDER))
        self.assertEqual(len(ident.problems), 1)
        self.assertIn("version", ident.problems[0])
        self.assertIn("Improper ID", logs.output[0])

    def test_group_only(self):
        with self.assertLogs("distroindex.identifier", level="WARNING"):
            ident = MavenIdentifier.parse("g@zip", ModuleType.FILE)
        self.assertEqual((ident.group, ident.artifact_id, ident.version), ("g", PLACEHOLDER, PLACEHOLDER))
        self.assertEqual(ident.extension, "zip")
        self.assertEqual(len(ident.problems), 2)
        self.assertFalse(ident.is_valid)

    def test_empty_segment(self):
        with self.assertLogs("distroindex.identifier", level="WARNING"):
            ident = MavenIdentifier.parse("g::v", ModuleType.FILE)
        self.assertEqual(ident.artifact_id, PLACEHOLDER)
        self.assertEqual(ident.version, "v")

    def test_not_a_string(self):
        with self.assertLogs("distroindex.identifier", level="WARNING"):
            ident = MavenIdentifier.parse(None, ModuleType.LITE_MOD)
        self.assertEqual((ident.group, ident.artifact_id, ident.version), (PLACEHOLDER, PLACEHOLDER, PLACEHOLDER))
        self.assertEqual(ident.extension, "litemod")
        self.assertFalse(ident.is_valid)

    def test_unknown_type_extension(self):
        ident = MavenIdentifier.parse("g:a:v", None)
        self.assertEqual(ident.extension, "jar")

    def test_artifact_path(self):
        ident = MavenIdentifier.parse("net.minecraftforge:forge:1.12.2@zip", ModuleType.FORGE_HOSTED)
        self.assertEqual(ident.artifact_path("libraries"), "libraries/net/minecraftforge/forge/1.12.2/forge-1.12.2.zip")
        self.assertEqual(ident.artifact_path(), "net/minecraftforge/forge/1.12.2/forge-1.12.2.zip")


if __name__ == '__main__':
    unittest.main()
