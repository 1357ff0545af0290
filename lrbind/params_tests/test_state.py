"""
Unit tests for state.py accessor configuration.
"""

import os
import tempfile
import unittest

from ..common import ConfigError
from ..state import AccessorConfig


class TestAccessorConfig(unittest.TestCase):
    """Tests for AccessorConfig."""

    def test_defaults(self):
        cfg = AccessorConfig()

        self.assertEqual(cfg.setter, "setDevelopParam")
        self.assertEqual(cfg.generic_getter, "getDevelopParam")
        self.assertEqual(cfg.versioned_getter, "get2012DevelopParam")

    def test_from_dict_partial(self):
        cfg = AccessorConfig.from_dict({"setter": "LrDevelopController.setValue"})

        self.assertEqual(cfg.setter, "LrDevelopController.setValue")
        self.assertEqual(cfg.generic_getter, "getDevelopParam")

    def test_from_dict_none(self):
        self.assertEqual(AccessorConfig.from_dict(None), AccessorConfig())

    def test_unknown_key_raises(self):
        with self.assertRaises(ConfigError):
            AccessorConfig.from_dict({"seter": "x"})

    def test_invalid_identifier_raises(self):
        for value in ["", "1abc", "set value", "a..b", 42]:
            with self.subTest(value=value):
                with self.assertRaises(ConfigError):
                    AccessorConfig.from_dict({"setter": value})

    def test_non_mapping_raises(self):
        with self.assertRaises(ConfigError):
            AccessorConfig.from_dict(["setter"])

    def test_str(self):
        self.assertIn("setter=setDevelopParam", str(AccessorConfig()))


class TestAccessorConfigFile(unittest.TestCase):
    """Tests for loading AccessorConfig from YAML."""

    def _write(self, content: str) -> str:
        fd, path = tempfile.mkstemp(suffix=".yaml")
        with os.fdopen(fd, "w") as f:
            f.write(content)
        self.addCleanup(os.remove, path)
        return path

    def test_from_file(self):
        path = self._write("generic_getter: getParam\nversioned_getter: getParam2012\n")
        cfg = AccessorConfig.from_file(path)

        self.assertEqual(cfg.generic_getter, "getParam")
        self.assertEqual(cfg.versioned_getter, "getParam2012")
        self.assertEqual(cfg.setter, "setDevelopParam")

    def test_empty_file_uses_defaults(self):
        self.assertEqual(AccessorConfig.from_file(self._write("")), AccessorConfig())

    def test_malformed_yaml_raises(self):
        with self.assertRaises(ConfigError):
            AccessorConfig.from_file(self._write("setter: [unclosed\n"))

    def test_missing_file_raises(self):
        with self.assertRaises(ConfigError):
            AccessorConfig.from_file(os.path.join(tempfile.gettempdir(), "lrbind-does-not-exist.yaml"))


if __name__ == "__main__":
    unittest.main()
