import os
import sys
import tempfile
import unittest
from unittest import TestCase

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from etherscan_export.config import ExportConfig, load_config
from etherscan_export.errors import ConfigError


class TestLoadConfig(TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def write_config(self, text):
        path = os.path.join(self.tmp.name, "config.yaml")
        with open(path, "w") as f:
            f.write(text)
        return path

    def test_defaults(self):
        config = load_config(environ={})
        self.assertEqual(config, ExportConfig())
        self.assertEqual(config.endpoint(), "https://api.etherscan.io/api")
        self.assertEqual(config.endpoint(rinkeby=True), "https://api-rinkeby.etherscan.io/api")
        self.assertEqual(config.base_contract_path, "contracts")
        self.assertEqual(config.success_message, "Contracts downloaded successfully!")

    def test_yaml_overrides(self):
        path = self.write_config("api_url: http://localhost:8545/api\nrequest_timeout: 5\n")

        config = load_config(path, environ={})

        self.assertEqual(config.api_url, "http://localhost:8545/api")
        self.assertEqual(config.request_timeout, 5.0)
        self.assertEqual(config.rinkeby_api_url, "https://api-rinkeby.etherscan.io/api")

    def test_env_takes_precedence_over_yaml(self):
        path = self.write_config("base_contract_path: lib\n")

        config = load_config(path, environ={"ETHERSCAN_EXPORT_BASE_PATH": "deps", "ETHERSCAN_EXPORT_TIMEOUT": "12"})

        self.assertEqual(config.base_contract_path, "deps")
        self.assertEqual(config.request_timeout, 12.0)

    def test_empty_file(self):
        self.assertEqual(load_config(self.write_config(""), environ={}), ExportConfig())

    def test_unknown_key(self):
        with self.assertRaises(ConfigError):
            load_config(self.write_config("apikey: secret\n"), environ={})

    def test_invalid_timeout(self):
        with self.assertRaises(ConfigError):
            load_config(environ={"ETHERSCAN_EXPORT_TIMEOUT": "soon"})
        with self.assertRaises(ConfigError):
            load_config(self.write_config("request_timeout: 0\n"), environ={})

    def test_not_a_mapping(self):
        with self.assertRaises(ConfigError):
            load_config(self.write_config("- a\n- b\n"), environ={})

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            load_config(os.path.join(self.tmp.name, "missing.yaml"), environ={})

    def test_config_is_frozen(self):
        with self.assertRaises(Exception):
            ExportConfig().api_url = "http://example.com"


if __name__ == "__main__":
    unittest.main()
