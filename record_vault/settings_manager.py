from __future__ import annotations
import os, sys, configparser, logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from record_vault.config import (
    APP_NAME, DEFAULT_PAGE_SIZE, EMPLOYEES_FILE, PAYROLL_FILE, LOGS_DIR, SORT_KEYS,
)

INI_BASENAME = "settings.ini"
PAGE_SIZE_ENV = "RECORDVAULT_PAGE_SIZE"

def _platform_config_dir() -> Path:
    if sys.platform.startswith("win"):
        base = os.getenv("APPDATA") or (Path.home() / "AppData" / "Roaming")
        return Path(base) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    return Path.home() / ".config" / APP_NAME

def default_ini_path() -> Path:
    return _platform_config_dir() / INI_BASENAME

@dataclass
class TableConfig:
    page_size: int = DEFAULT_PAGE_SIZE
    default_sort: str = ""

@dataclass
class DataConfig:
    employees_file: str = EMPLOYEES_FILE
    payroll_file: str = PAYROLL_FILE

@dataclass
class LogConfig:
    log_dir: str = LOGS_DIR
    level: str = "INFO"

    def level_number(self) -> int:
        level = logging.getLevelName(self.level.strip().upper())
        return level if isinstance(level, int) else logging.INFO

def _int(v, default: int) -> int:
    try:
        n = int(str(v).strip())
    except ValueError:
        return default
    return n if n >= 1 else default

class SettingsStore:
    def __init__(self, ini_path: Optional[Path] = None) -> None:
        self.ini_path = Path(ini_path or default_ini_path())
        self.cfg = configparser.ConfigParser()

    def load(self) -> None:
        self.cfg.clear()
        if self.ini_path.exists():
            self.cfg.read(self.ini_path, encoding="utf-8")

    def save(self) -> None:
        self.ini_path.parent.mkdir(parents=True, exist_ok=True)
        with self.ini_path.open("w", encoding="utf-8") as f:
            self.cfg.write(f)

    def _section(self, name: str):
        return self.cfg[name] if self.cfg.has_section(name) else {}

    def get_table(self) -> TableConfig:
        s = self._section("table")
        sort = s.get("default_sort", "").strip()
        if sort not in SORT_KEYS:
            logging.warning(f"Ignoring unknown default_sort in {self.ini_path}: {sort}")
            sort = ""
        page_size = _int(s.get("page_size", DEFAULT_PAGE_SIZE), DEFAULT_PAGE_SIZE)
        env = os.getenv(PAGE_SIZE_ENV)
        if env is not None:
            page_size = _int(env, page_size)
        return TableConfig(page_size=page_size, default_sort=sort)

    def get_data(self) -> DataConfig:
        s = self._section("data")
        return DataConfig(
            employees_file=s.get("employees_file", EMPLOYEES_FILE),
            payroll_file=s.get("payroll_file", PAYROLL_FILE),
        )

    def get_logging(self) -> LogConfig:
        s = self._section("logging")
        return LogConfig(log_dir=s.get("log_dir", LOGS_DIR), level=s.get("level", "INFO"))

    def update_table(self, page_size: int, default_sort: str = "") -> None:
        if not self.cfg.has_section("table"):
            self.cfg.add_section("table")
        self.cfg.set("table","page_size",str(int(page_size)))
        self.cfg.set("table","default_sort",(default_sort or "").strip())

    def update_data(self, employees_file: str, payroll_file: str) -> None:
        if not self.cfg.has_section("data"):
            self.cfg.add_section("data")
        self.cfg.set("data","employees_file",(employees_file or "").strip())
        self.cfg.set("data","payroll_file",(payroll_file or "").strip())

def bootstrap_settings(ini_path: Optional[Path] = None):
    store = SettingsStore(ini_path)
    store.load()
    return store, store.get_table(), store.get_data(), store.get_logging()
