import unittest
import os
import sys
import tempfile

import yaml

# 添加项目根目录到Python路径
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, project_root)

from sysmon.config.config_manager import ConfigManager


class TestConfigManager(unittest.TestCase):
    """测试配置管理器"""

    def setUp(self):
        self.test_dir = tempfile.TemporaryDirectory()
        self.config_dir = os.path.join(self.test_dir.name, "config")

    def tearDown(self):
        self.test_dir.cleanup()

    def test_defaults_without_config_dir(self):
        config = ConfigManager(config_dir=self.config_dir)

        self.assertEqual(config.get("monitor.top_n"), 10)
        self.assertIsNone(config.get("monitor.log_dir"))
        self.assertEqual(config.get("monitor.log_file_prefix"), "SimpleSystemMonitorLog")
        self.assertEqual(config.get("general.log_level"), "WARNING")

    def test_sampling_timing_not_configurable(self):
        """采样间隔和监控周期不在配置中"""
        config = ConfigManager(config_dir=self.config_dir)
        self.assertIsNone(config.get("monitor.interval"))
        self.assertIsNone(config.get("monitor.sample_interval"))

    def test_file_values_override_defaults(self):
        """文件中的值覆盖默认值，缺失的键保留默认值"""
        os.makedirs(self.config_dir)
        with open(os.path.join(self.config_dir, "config.yaml"), "w", encoding="utf-8") as f:
            yaml.dump({"monitor": {"top_n": 5, "log_dir": "/var/log/sysmon"}}, f)

        config = ConfigManager(config_dir=self.config_dir)
        self.assertEqual(config.get("monitor.top_n"), 5)
        self.assertEqual(config.get("monitor.log_dir"), "/var/log/sysmon")
        self.assertEqual(config.get("monitor.log_file_prefix"), "SimpleSystemMonitorLog")

    def test_invalid_yaml_falls_back_to_defaults(self):
        os.makedirs(self.config_dir)
        with open(os.path.join(self.config_dir, "config.yaml"), "w", encoding="utf-8") as f:
            f.write("monitor: [unclosed\n")

        config = ConfigManager(config_dir=self.config_dir)
        self.assertEqual(config.get("monitor.top_n"), 10)

    def test_get_set_with_dot_path(self):
        config = ConfigManager(config_dir=self.config_dir)
        config.set("monitor.top_n", 3)
        config.set("extra.nested.value", "x")

        self.assertEqual(config.get("monitor.top_n"), 3)
        self.assertEqual(config.get("extra.nested.value"), "x")
        self.assertEqual(config.get("missing.key", "fallback"), "fallback")

    def test_save_writes_yaml(self):
        config = ConfigManager(config_dir=self.config_dir)
        config.set("monitor.top_n", 7)
        config.save()

        with open(config.main_config_path, "r", encoding="utf-8") as f:
            saved = yaml.safe_load(f)
        self.assertEqual(saved["monitor"]["top_n"], 7)
        self.assertEqual(ConfigManager(config_dir=self.config_dir).get("monitor.top_n"), 7)


if __name__ == '__main__':
    unittest.main()
