"""Константы ReportDesk.

Всё здесь обычные константы модуля; часть можно переопределить
через переменные окружения (удобно для dev-запусков и тестов).
"""

from __future__ import annotations

import os

# --- Форма ---
MIN_YEAR = 2000  # нижняя граница степпера, верхней нет
DEFAULT_YEAR = 2025
HISTORY_CAPACITY = 5  # сколько последних запросов держим в истории
CLIENT_NAME_MIN_LEN = 2

# --- Отправка ---
REPORT_ENDPOINT = os.getenv("REPORTDESK_ENDPOINT", "https://api.kokoodi.com/v1/reports/generate")
STORAGE_BASE_URL = "https://storage.kokoodi.com/reports"
TRANSPORT_KIND = os.getenv("REPORTDESK_TRANSPORT", "simulated")  # simulated | http | local
REQUEST_TIMEOUT = float(os.getenv("REPORTDESK_REQUEST_TIMEOUT", "8.0"))
SIMULATED_DELAY_SEC = 1.5
OUTPUT_DIR = os.getenv("REPORTDESK_OUTPUT_DIR") or None  # None → текущая папка

# --- Логирование ---
LOG_ENABLED = True
LOG_DEBUG = os.getenv("REPORTDESK_DEBUG") == "1"
LOG_FILE = "logs/app.log"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUPS = 3
