"""
Unit tests for params/schema.py module.

Tests ParamDef construction and the two binding variants.
"""

import dataclasses
import unittest

from ..common import ValidationError
from ..params.schema import ParamDef, GenericBinding, VersionedBinding, DEFAULT_CATEGORY


class TestBindings(unittest.TestCase):
    """Tests for GenericBinding / VersionedBinding."""

    def test_generic_binding_has_no_alias(self):
        self.assertIsNone(GenericBinding().alias)

    def test_versioned_binding_keeps_alias(self):
        self.assertEqual(VersionedBinding("Exposure2012").alias, "Exposure2012")

    def test_versioned_binding_rejects_empty_alias(self):
        """An alias that is present but empty is structurally invalid."""
        with self.assertRaises(ValidationError):
            VersionedBinding("")

    def test_versioned_binding_rejects_non_string_alias(self):
        with self.assertRaises(ValidationError):
            VersionedBinding(None)

    def test_bindings_are_value_objects(self):
        self.assertEqual(GenericBinding(), GenericBinding())
        self.assertEqual(VersionedBinding("A"), VersionedBinding("A"))
        self.assertNotEqual(VersionedBinding("A"), VersionedBinding("B"))


class TestParamDef(unittest.TestCase):
    """Tests for ParamDef."""

    def test_defaults(self):
        param = ParamDef(name="Texture", min=-100, max=100)

        self.assertEqual(param.binding, GenericBinding())
        self.assertEqual(param.category, DEFAULT_CATEGORY)
        self.assertIsNone(param.alias)
        self.assertFalse(param.is_versioned)

    def test_make_without_alias_is_generic(self):
        param = ParamDef.make("Texture", -100, 100)
        self.assertIsInstance(param.binding, GenericBinding)

    def test_make_with_alias_is_versioned(self):
        param = ParamDef.make("Exposure", -5, 5, alias="Exposure2012")

        self.assertIsInstance(param.binding, VersionedBinding)
        self.assertEqual(param.alias, "Exposure2012")
        self.assertTrue(param.is_versioned)

    def test_make_with_empty_alias_raises(self):
        with self.assertRaises(ValidationError):
            ParamDef.make("Exposure", -5, 5, alias="")

    def test_make_keeps_category(self):
        param = ParamDef.make("Rating", 0, 5, category="library")
        self.assertEqual(param.category, "library")

    def test_param_is_immutable(self):
        param = ParamDef.make("Texture", -100, 100)

        with self.assertRaises(dataclasses.FrozenInstanceError):
            param.min = 0  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
