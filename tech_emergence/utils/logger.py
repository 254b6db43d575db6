import datetime
from enum import Enum
from typing import Any, Optional, Set

class LogCategory(Enum):
    SYSTEM = "SYSTEM"
    KNOWLEDGE = "KNOWLEDGE"
    RESEARCH = "RESEARCH"
    DIPLOMACY = "DIPLOMACY"
    ERROR = "ERROR"

class Logger:
    """Process-wide console logger. Lines read [Time][Tick:N][CATEGORY] message."""
    _instance = None
    _time_manager = None
    _debug_enabled = True
    _muted: Set[LogCategory] = set()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
        return cls._instance

    @classmethod
    def set_time_manager(cls, time_manager: Optional[Any]):
        """Injects the TimeManager so lines carry the simulation tick."""
        cls._time_manager = time_manager

    @classmethod
    def set_debug(cls, enabled: bool):
        cls._debug_enabled = enabled

    @classmethod
    def mute(cls, category: LogCategory, muted: bool = True):
        # Errors always print
        if category == LogCategory.ERROR:
            return
        if muted:
            cls._muted.add(category)
        else:
            cls._muted.discard(category)

    @classmethod
    def _resolve_tick(cls, tick: int) -> int:
        if tick != -1:
            return tick
        if cls._time_manager:
            return cls._time_manager.total_ticks
        return 0

    @staticmethod
    def format_line(category: LogCategory, message: str, tick: int = -1) -> str:
        timestamp = datetime.datetime.now().strftime("%H:%M:%S")
        return f"[{timestamp}][Tick:{Logger._resolve_tick(tick)}][{category.value}] {message}"

    @staticmethod
    def log(category: LogCategory, message: str, tick: int = -1):
        """tick=-1 reads the current tick from the injected TimeManager."""
        if category in Logger._muted:
            return
        print(Logger.format_line(category, message, tick))

    @staticmethod
    def info(message: str, tick: int = -1):
        Logger.log(LogCategory.SYSTEM, message, tick)

    @staticmethod
    def knowledge(message: str, tick: int = -1):
        Logger.log(LogCategory.KNOWLEDGE, message, tick)

    @staticmethod
    def research(message: str, tick: int = -1):
        Logger.log(LogCategory.RESEARCH, message, tick)

    @staticmethod
    def diplomacy(message: str, tick: int = -1):
        Logger.log(LogCategory.DIPLOMACY, message, tick)

    @staticmethod
    def error(message: str, tick: int = -1):
        Logger.log(LogCategory.ERROR, message, tick)

    @staticmethod
    def debug(message: str, tick: int = -1):
        if Logger._debug_enabled:
            Logger.log(LogCategory.SYSTEM, f"DEBUG: {message}", tick)
