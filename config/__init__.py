import os
import yaml
import logging

class AppConfig:
    def __init__(self):
        self.log_file = 'debug-log.txt'
        self.console_level = 'INFO'
        self.file_level = 'DEBUG'
        self.log_backup_count = 1
        self.log_retention_hours = 24

class ConfigurationManager:
    def __init__(self, config_file_path='~/.xml-ancestor-path/config.yml'):
        self.config_file_path = os.path.expanduser(config_file_path)
        self.app_config = AppConfig()
        self.logger = logging.getLogger(__name__)
        if os.path.exists(self.config_file_path):
            self.apply_settings(self.load_config_file())
        else:
            self.logger.debug(f"No config file at {self.config_file_path}, using defaults.")

    def load_config_file(self):
        try:
            with open(self.config_file_path, 'r') as config_file:
                current_config = yaml.safe_load(config_file)
        except yaml.YAMLError as e:
            raise ValueError(f"Config file {self.config_file_path} is not valid YAML: {e}") from e

        if current_config is None:
            return {}
        if not isinstance(current_config, dict):
            raise ValueError(f"Config file {self.config_file_path} must contain a mapping of settings.")
        return current_config

    def apply_settings(self, settings):
        for key, value in settings.items():
            if hasattr(self.app_config, key):
                setattr(self.app_config, key, value)
            else:
                self.logger.warning(f"Ignoring unknown setting '{key}' in {self.config_file_path}")
