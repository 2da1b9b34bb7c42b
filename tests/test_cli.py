"""Tests for the docproxy CLI."""

import logging
import unittest
from unittest.mock import patch

from typer.testing import CliRunner

from docproxy.cli.main import app


class CliTest(unittest.TestCase):
    """Tests for the command line interface."""

    def setUp(self):
        self.runner = CliRunner()

    def tearDown(self):
        logging.getLogger("docproxy").setLevel(logging.NOTSET)

    def test_demo(self):
        result = self.runner.invoke(app, ["demo"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            result.output.splitlines(),
            [
                "Loading Document: Hello, Proxy Pattern!",
                "Displaying Document: Hello, Proxy Pattern!",
            ],
        )

    def test_render_times(self):
        result = self.runner.invoke(app, ["render", "--times", "3", "memo"])
        self.assertEqual(result.exit_code, 0, result.output)
        out = result.output.splitlines()
        self.assertEqual(out.count("Loading Document: memo"), 1)
        self.assertEqual(out.count("Displaying Document: memo"), 3)

    def test_render_eager(self):
        result = self.runner.invoke(app, ["render", "--eager", "memo"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(
            result.output.splitlines(),
            ["Loading Document: memo", "Displaying Document: memo"],
        )

    def test_render_rejects_zero_times(self):
        result = self.runner.invoke(app, ["render", "-n", "0", "memo"])
        self.assertEqual(result.exit_code, 2)

    def test_render_error_exits_with_one(self):
        with patch(
            "docproxy.cli.commands.render.open_document",
            side_effect=RuntimeError("disk unavailable"),
        ):
            result = self.runner.invoke(app, ["render", "memo"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error: disk unavailable", result.output)

    def test_verbose_enables_debug_logging(self):
        result = self.runner.invoke(app, ["--verbose", "demo"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(logging.getLogger("docproxy").level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
