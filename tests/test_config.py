import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from patterndemos.config.config import load_config, validate_config
from patterndemos.config.schema import DemoConfig


class LoadConfigTests(unittest.TestCase):
    def test_defaults_file(self) -> None:
        cfg = validate_config(load_config())
        self.assertIsInstance(cfg, DemoConfig)
        first = cfg.observer.channels[0]
        self.assertEqual(first.name, "codeWithMe")
        self.assertEqual(first.subscribers, ["A", "B", "C"])
        self.assertEqual([s.action for s in first.script], ["publish", "remove", "publish"])
        self.assertEqual(cfg.display.currency, "₹")

    def test_missing_file_exits(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as cm:
            load_config("/nonexistent/patterndemos.yml")
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("Config file not found", err.getvalue())

    def test_non_mapping_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cfg.yml"
            path.write_text("- just\n- a list\n", encoding="utf-8")
            with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
                load_config(str(path))

    def test_custom_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cfg.yml"
            path.write_text("display:\n  currency: $\nsingleton:\n  instances: 5\n", encoding="utf-8")
            cfg = validate_config(load_config(str(path)))
        self.assertEqual(cfg.display.currency, "$")
        self.assertEqual(cfg.singleton.instances, 5)
        self.assertEqual(cfg.observer.channels, [])
        self.assertEqual(cfg.facade.price, 499)


class ValidateConfigTests(unittest.TestCase):
    def test_empty_config_gets_defaults(self) -> None:
        cfg = validate_config({})
        self.assertEqual(cfg.singleton.instances, 3)
        self.assertEqual(cfg.factory.animals, ["Dog", "Cat"])
        self.assertEqual(cfg.decorator.toppings, ["milk", "sugar"])

    def test_unsupported_entries_dropped_with_warning(self) -> None:
        raw = {
            "strategy": {"payments": [{"method": "cash", "amount": 5}, {"method": "UPI", "amount": 7}]},
            "decorator": {"toppings": ["milk", "cream"]},
            "observer": {
                "channels": [
                    {
                        "name": "c",
                        "subscribers": ["A"],
                        "script": [{"action": "shout", "value": "x"}, {"action": "publish", "value": 1}],
                    }
                ]
            },
        }
        out = io.StringIO()
        with redirect_stdout(out):
            cfg = validate_config(raw)
        text = out.getvalue()
        self.assertIn("WARNING: Unsupported payment method 'cash'", text)
        self.assertIn("WARNING: Unsupported topping 'cream'", text)
        self.assertIn("WARNING: Unsupported observer action 'shout'", text)
        self.assertEqual([p.method for p in cfg.strategy.payments], ["upi"])
        self.assertEqual(cfg.decorator.toppings, ["milk"])
        self.assertEqual(cfg.observer.channels[0].script[0].value, "1")

    def test_invalid_values_exit(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit) as cm:
            validate_config({"singleton": {"instances": 0}})
        self.assertEqual(cm.exception.code, 1)
        self.assertIn("ERROR: Invalid config", err.getvalue())

    def test_non_positive_amount_exits(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            validate_config({"strategy": {"payments": [{"method": "upi", "amount": 0}]}})

    def test_observer_step_without_value_dropped(self) -> None:
        raw = {
            "observer": {
                "channels": [
                    {
                        "name": "c",
                        "subscribers": ["A"],
                        "script": [{"action": "publish", "value": None}, {"action": "publish"}, {"action": "publish", "value": "ok"}],
                    }
                ]
            }
        }
        out = io.StringIO()
        with redirect_stdout(out):
            cfg = validate_config(raw)
        self.assertIn("WARNING: Observer step 'publish' in channel 'c' has no value", out.getvalue())
        self.assertEqual([s.value for s in cfg.observer.channels[0].script], ["ok"])

    def test_scalar_subscribers_rejected(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit):
            validate_config({"observer": {"channels": [{"name": "c", "subscribers": "ABC"}]}})
        self.assertIn("ERROR: Invalid config", err.getvalue())

    def test_missing_subscribers_means_empty(self) -> None:
        cfg = validate_config({"observer": {"channels": [{"name": "c", "subscribers": None}]}})
        self.assertEqual(cfg.observer.channels[0].subscribers, [])


if __name__ == "__main__":
    unittest.main()
