"""
Unit tests for the calculator CLI commands and the application factory.
"""
import unittest

from webcalc import create_app


def _create_app(**config):
    test_config = {
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "WTF_CSRF_ENABLED": False,
    }
    test_config.update(config)
    return create_app(test_config)


class TestEvalCommand(unittest.TestCase):

    def setUp(self):
        self.runner = _create_app().test_cli_runner()

    def test_prints_result(self):
        result = self.runner.invoke(args=["calculator", "eval", "2+3*4"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), "14")

    def test_glyphs_accepted(self):
        result = self.runner.invoke(args=["calculator", "eval", "10÷4"])
        self.assertEqual(result.output.strip(), "2.5")

    def test_error_exits_nonzero(self):
        result = self.runner.invoke(args=["calculator", "eval", "1/0"])
        self.assertEqual(result.exit_code, 1)
        self.assertEqual(result.output.strip(), "Error")

    def test_precision_from_config(self):
        runner = _create_app(CALCULATOR_PRECISION=3).test_cli_runner()
        result = runner.invoke(args=["calculator", "eval", "2/3"])
        self.assertEqual(result.output.strip(), "0.667")


class TestKeysCommand(unittest.TestCase):

    def setUp(self):
        self.runner = _create_app().test_cli_runner()

    def test_replays_keys(self):
        result = self.runner.invoke(args=["calculator", "keys", "2+3*4="])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.output.strip(), "14")

    def test_clear_key(self):
        result = self.runner.invoke(args=["calculator", "keys", "12c"])
        self.assertEqual(result.output.strip(), "0")

    def test_percent_key(self):
        result = self.runner.invoke(args=["calculator", "keys", "200+50%"])
        self.assertEqual(result.output.strip(), "200+0.5")

    def test_verbose_prints_every_refresh(self):
        result = self.runner.invoke(args=["calculator", "keys", "--verbose", "12"])
        self.assertEqual(result.output.splitlines(), ["0", "1", "12"])


class TestCreateApp(unittest.TestCase):

    def test_missing_secret_key_raises(self):
        with self.assertRaises(ValueError):
            _create_app(SECRET_KEY=None)

    def test_root_redirects_to_calculator(self):
        client = _create_app().test_client()
        r = client.get("/")
        self.assertEqual(r.status_code, 302)
        self.assertIn("/calculator/", r.headers["Location"])


if __name__ == "__main__":
    unittest.main()
