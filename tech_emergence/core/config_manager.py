import copy
import json
import os
import time
from typing import Any, Dict
from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler
from tech_emergence.utils.logger import Logger, LogCategory

class ConfigHandler(FileSystemEventHandler):
    def __init__(self, callback, filename: str):
        self.callback = callback
        self.filename = filename

    def on_modified(self, event):
        if not event.is_directory and event.src_path.endswith(self.filename):
            # Give file system a moment to flush
            time.sleep(0.1)
            self.callback()

class ConfigManager:
    def __init__(self, config_path: str, watch: bool = True):
        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self.observer = None

        # Initial load
        self.load_config()

        if watch:
            directory = os.path.dirname(os.path.abspath(config_path))
            handler = ConfigHandler(self.load_config, os.path.basename(config_path))
            self.observer = Observer()
            self.observer.schedule(handler, directory, recursive=False)
            self.observer.start()
            Logger.info(f"ConfigManager watching: {config_path}")

    def load_config(self):
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            Logger.error(f"Failed to load config: {e}")
            return
        # Swap the whole dict so readers never see a half-loaded config
        self.config = loaded
        Logger.log(LogCategory.SYSTEM, "Config loaded successfully")

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get config value using dot notation (e.g. "research.academy.cost")
        """
        keys = key_path.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key_path: str, value: Any):
        """Set a value in memory using dot notation. Does not write the file."""
        keys = key_path.split('.')
        updated = copy.deepcopy(self.config)
        node = updated
        for k in keys[:-1]:
            if not isinstance(node.get(k), dict):
                node[k] = {}
            node = node[k]
        node[keys[-1]] = value
        self.config = updated

    def stop(self):
        if self.observer is not None:
            self.observer.stop()
            self.observer.join()
            self.observer = None
