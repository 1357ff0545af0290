"""
Unit tests for params/generators/docs_gen.py module.
"""

import unittest

from ..state import AccessorConfig
from ..params import REGISTRY
from ..params.registry import ParamRegistry
from ..params.schema import ParamDef
from ..params.generators.docs_gen import generate_param_docs


class TestParamDocs(unittest.TestCase):
    """Tests for generate_param_docs."""

    def setUp(self):
        self.reg = ParamRegistry.from_params([
            ParamDef.make("Exposure", -5, 5, alias="Exposure2012", description="Exposure in stops"),
            ParamDef.make("SharpenRadius", 0.5, 3),
        ])

    def test_summary_line(self):
        docs = generate_param_docs(self.reg)
        self.assertIn("2 parameters (1 versioned)", docs)
        self.assertIn("`setDevelopParam`", docs)

    def test_rows_in_registry_order(self):
        lines = generate_param_docs(self.reg).splitlines()
        rows = [line for line in lines if line.startswith("| `")]

        self.assertEqual(rows, [
            "| `Exposure` | develop | -5 | 5 | `get2012DevelopParam` | `Exposure2012` |",
            "| `SharpenRadius` | develop | 0.5 | 3 | `getDevelopParam` |  |",
        ])

    def test_notes_section(self):
        docs = generate_param_docs(self.reg)
        self.assertIn("## Notes", docs)
        self.assertIn("- `Exposure`: Exposure in stops", docs)

    def test_no_notes_without_descriptions(self):
        reg = ParamRegistry.from_params([ParamDef.make("Texture", -100, 100)])
        self.assertNotIn("## Notes", generate_param_docs(reg))

    def test_custom_accessors(self):
        docs = generate_param_docs(self.reg, AccessorConfig(setter="setX", versioned_getter="getV"))
        self.assertIn("`setX`", docs)
        self.assertIn("`getV`", docs)

    def test_pipe_in_category_escaped(self):
        reg = ParamRegistry.from_params([ParamDef.make("A", 0, 1, category="a|b")])
        self.assertIn("a\\|b", generate_param_docs(reg))

    def test_pipes_and_backticks_in_names_escaped(self):
        reg = ParamRegistry.from_params([
            ParamDef.make("a|b`c", 0, 1, alias="V|`x`", description="uses | and `ticks`\nhere"),
        ])
        lines = generate_param_docs(reg).splitlines()

        self.assertIn("| ``a\\|b`c`` | develop | 0 | 1 | `get2012DevelopParam` | `` V\\|`x` `` |", lines)
        self.assertIn("- ``a|b`c``: uses \\| and \\`ticks\\` here", lines)

    def test_global_registry(self):
        docs = generate_param_docs(REGISTRY)
        self.assertIn("102 parameters (7 versioned)", docs)


if __name__ == "__main__":
    unittest.main()
