"""
Unit tests for params/suggest.py and params/errors.py.
"""

import unittest

from ..params.suggest import suggest_similar, format_suggestion
from ..params.errors import unknown_param_error, range_error, duplicate_error


class TestSuggestSimilar(unittest.TestCase):
    """Tests for suggest_similar function."""

    def test_close_match(self):
        suggestions = suggest_similar("Exposur", ["Exposure", "Temperature", "Dehaze"])
        self.assertEqual(suggestions[0], "Exposure")

    def test_no_match_for_unrelated(self):
        self.assertEqual(suggest_similar("zzzzzz", ["Exposure", "Tint"]), [])

    def test_empty_inputs(self):
        self.assertEqual(suggest_similar("", ["Exposure"]), [])
        self.assertEqual(suggest_similar("Exposure", []), [])

    def test_max_suggestions(self):
        options = [f"GrainAmount{i}" for i in range(10)]
        self.assertLessEqual(len(suggest_similar("GrainAmount", options, max_suggestions=2)), 2)


class TestFormatting(unittest.TestCase):
    """Tests for message formatting helpers."""

    def test_format_suggestion(self):
        self.assertEqual(format_suggestion([]), "")
        self.assertEqual(format_suggestion(["Tint"]), "Did you mean 'Tint'?")
        self.assertEqual(format_suggestion(["A", "B"]), "Did you mean one of: 'A', 'B'?")

    def test_unknown_param_error(self):
        self.assertEqual(unknown_param_error("X"), "Unknown parameter 'X'")
        self.assertEqual(unknown_param_error("X", ["Y"]), "Unknown parameter 'X'. Did you mean 'Y'?")

    def test_range_error_names_param(self):
        msg = range_error("Exposure", 10, 5)
        self.assertIn("'Exposure'", msg)
        self.assertIn("got 10", msg)

    def test_duplicate_error(self):
        self.assertEqual(duplicate_error("Tint"), "'Tint' is already registered")


if __name__ == "__main__":
    unittest.main()
