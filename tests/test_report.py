import unittest

from phishscore.app.heuristics import analyze_url
from phishscore.app.report import (
    chart_series,
    render_table,
    strip_feature_prefix,
    table_rows,
    verdict_display,
)


class TestReport(unittest.TestCase):
    def test_strip_feature_prefix(self):
        self.assertEqual(strip_feature_prefix("AI Feature 1: URL Length (> 75 chars)"),
                         "URL Length (> 75 chars)")
        self.assertEqual(strip_feature_prefix("Feature 12: Custom"), "Custom")
        self.assertEqual(strip_feature_prefix("No prefix here"), "No prefix here")

    def test_chart_series_one_axis_per_rule(self):
        chart = chart_series(analyze_url("http://192.168.1.1/login"))
        self.assertEqual(chart["labels"], [
            "URL Length (> 75 chars)",
            "IP Address in Hostname",
            "'@' Symbol",
            "Excessive Subdomain Depth (>2)",
            "Suspicious Keywords",
        ])
        self.assertEqual(chart["data"], [0, 40, 0, 0, 15])
        self.assertEqual(chart["max"], [20, 40, 30, 25, 15])

    def test_table_rows(self):
        rows = table_rows(analyze_url("http://user@example.com"))
        self.assertEqual(len(rows), 5)
        at = rows[2]
        self.assertEqual(at["status"], "triggered")
        self.assertEqual(at["points"], "30/30")
        self.assertEqual(rows[0]["status"], "clear")
        self.assertEqual(rows[0]["points"], "0/20")

    def test_verdict_display(self):
        display = verdict_display(analyze_url("http://x@10.0.0.1"))
        self.assertEqual(display, {"verdict": "Phishing Risk: High", "phish_score": 70,
                                   "css_class": "phishing"})

    def test_render_table(self):
        text = render_table(analyze_url("http://example.com"))
        lines = text.splitlines()
        self.assertEqual(lines[0], "Legitimate (score 0)")
        self.assertIn("Long URLs can obscure suspicious domains.", text)
        self.assertEqual(len(lines), 1 + 2 * 5)

    def test_render_table_for_invalid_url(self):
        result = analyze_url("not a url")
        self.assertEqual(chart_series(result), {"labels": [], "data": [], "max": []})
        text = render_table(result)
        self.assertTrue(text.startswith("Error: Invalid URL (score 100)"))
        self.assertIn("no rules were evaluated", text)


if __name__ == '__main__':
    unittest.main()
