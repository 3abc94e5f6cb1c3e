import os
import yaml
from typing import Dict, Any
from sysmon.utils.logger import get_logger, LOG_FILE_PREFIX

class ConfigManager:
    """配置管理器，负责加载、保存和访问配置文件"""

    def __init__(self, config_dir: str = "config"):
        """
        初始化配置管理器

        Args:
            config_dir: 配置文件目录
        """
        self.config_dir = os.path.abspath(config_dir)
        self.logger = get_logger("config_manager")

        # 配置文件路径
        self.main_config_path = os.path.join(self.config_dir, "config.yaml")

        # 配置数据
        self._config: Dict[str, Any] = {}

        # 加载配置
        self.load()

    def load(self) -> None:
        """加载配置文件"""
        # 确保配置目录存在
        if not os.path.exists(self.config_dir):
            self.logger.debug(f"配置目录 {self.config_dir} 不存在，将使用默认配置")
            self._init_default_config()
            return

        try:
            if os.path.exists(self.main_config_path):
                with open(self.main_config_path, "r", encoding="utf-8") as f:
                    loaded = yaml.safe_load(f) or {}
                self._init_default_config()
                self._merge(self._config, loaded)
                self.logger.info(f"已加载主配置: {self.main_config_path}")
            else:
                self.logger.debug(f"主配置文件 {self.main_config_path} 不存在，使用默认配置")
                self._init_default_config()
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"加载主配置失败: {str(e)}，使用默认配置")
            self._init_default_config()

    def _init_default_config(self) -> None:
        """初始化默认主配置"""
        self._config = {
            "general": {
                "log_level": "WARNING"
            },
            "monitor": {
                "log_dir": None,  # None 表示用户文档目录
                "log_file_prefix": LOG_FILE_PREFIX,
                "top_n": 10
            }
        }

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> None:
        """将文件中的配置递归合并到默认配置之上"""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                self._merge(base[key], value)
            else:
                base[key] = value

    def save(self) -> None:
        """保存配置文件"""
        # 确保配置目录存在
        os.makedirs(self.config_dir, exist_ok=True)

        try:
            with open(self.main_config_path, "w", encoding="utf-8") as f:
                yaml.dump(self._config, f, sort_keys=False, indent=2)
            self.logger.info(f"已保存主配置: {self.main_config_path}")
        except OSError as e:
            self.logger.error(f"保存主配置失败: {str(e)}")
            raise

    def get(self, path: str, default: Any = None) -> Any:
        """
        通过点路径获取配置值

        Args:
            path: 配置路径，如 "monitor.top_n"
            default: 默认值

        Returns:
            配置值或默认值
        """
        current = self._config
        for part in path.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def set(self, path: str, value: Any) -> None:
        """
        通过点路径设置配置值

        Args:
            path: 配置路径，如 "monitor.log_dir"
            value: 要设置的值
        """
        parts = path.split(".")

        # 遍历路径设置值
        current = self._config
        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]

        # 设置最终值
        current[parts[-1]] = value
        self.logger.debug(f"设置配置 {path} = {value}")

    def __str__(self) -> str:
        """返回配置的字符串表示"""
        return f"ConfigManager(config_dir={self.config_dir})"
