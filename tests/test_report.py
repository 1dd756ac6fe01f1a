import unittest

from pydantic import ValidationError

from analyzer.report import (
    SAMPLE_TEXT,
    ReportConfig,
    WordRule,
    build_report,
    default_rules,
    main,
)


class TestReport(unittest.TestCase):
    """Tests for the report consumer"""

    def test_build_report_on_sample(self):
        report = build_report(SAMPLE_TEXT)

        self.assertEqual(report["statistics"]["word_count"], 9)
        self.assertEqual(report["statistics"]["unique_word_count"], 7)
        self.assertEqual(report["statistics"]["longest_word"], "empowering")
        self.assertEqual(report["most_common"][0], {"word": "rust", "count": 2})
        self.assertEqual(
            report["rules"]["Words longer than 3 letters"],
            ["rust", "fast", "safe", "rust", "empowering", "developers"],
        )
        self.assertEqual(report["rules"]["Words starting with 'r'"], ["rust", "rust"])
        self.assertEqual(len(report["pairs"]), 8)

    def test_custom_rules_and_config(self):
        config = ReportConfig(long_word_min_length=5, top_k=1)
        rules = [WordRule(description="Digits", check=str.isdigit)]

        report = build_report("call 911 or 112 now", config=config, rules=rules)

        self.assertEqual(report["rules"], {"Digits": ["911", "112"]})
        self.assertEqual(len(report["most_common"]), 1)

    def test_default_rules_follow_config(self):
        rules = default_rules(ReportConfig(long_word_min_length=4))
        self.assertEqual(rules[0].description, "Words longer than 4 letters")
        self.assertTrue(rules[0].check("hello"))
        self.assertFalse(rules[0].check("four"))

    def test_empty_text(self):
        report = build_report("")
        self.assertEqual(report["words"], [])
        self.assertEqual(report["most_common"], [])
        self.assertEqual(report["pairs"], [])
        self.assertIsNone(report["statistics"]["longest_word"])

    def test_invalid_config(self):
        with self.assertRaises(ValidationError):
            ReportConfig(top_k=0)
        with self.assertRaises(ValidationError):
            ReportConfig(long_word_min_length=-1)

    def test_main_prints_report(self):
        from contextlib import redirect_stdout
        import io

        buffer = io.StringIO()
        with redirect_stdout(buffer):
            main("Hello hello world")

        output = buffer.getvalue()
        self.assertIn("Word count: 3", output)
        self.assertIn("hello → world", output)
