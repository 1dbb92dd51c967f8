"""Shared fixtures for log-analyzer tests."""

from __future__ import annotations

from pathlib import Path

import pytest


# ── Sample log lines ──────────────────────────────────────────────────

SAMPLE_LARAVEL_LINES = [
    "[2024-08-22 10:00:00] local.ERROR: Something failed",
    "Stack trace line 1",
    "#0 /var/www/app/Http/Controllers/HomeController.php(42): App\\Services\\Foo->bar()",
    "[2024-08-22 10:05:00] production.INFO: User logged in",
    "[2024-08-23 09:00:00] local.error: Queue worker stopped",
]

SAMPLE_APACHE_LINES = [
    "[Thu Aug 22 10:00:00.123456 2024] [core:error] [pid 1234:tid 140000] [client 192.168.1.100:54321] AH00126: Invalid URI in request GET /bad HTTP/1.1",
    "[Thu Aug 22 10:00:01.000001 2024] [mpm_prefork:notice] [pid 100] AH00163: Apache/2.4.41 configured",
    "PHP Stack trace:",
    "[Fri Aug 23 11:30:00.500000 2024] [ssl:warn] [pid 2048] AH01909: RSA certificate configured",
]

SAMPLE_ACCESS_LINES = [
    '127.0.0.1 - - [22/Aug/2024:10:00:00 +0000] "GET /index.html HTTP/1.1" 200 1024 "-" "Mozilla/5.0"',
    '10.0.0.5 - - [22/Aug/2024:10:01:00 +0000] "POST /api/login HTTP/1.1" 302 0 "http://example.com/login" "curl/7.68.0"',
    '192.168.1.50 - - [23/Aug/2024:12:00:00 +0000] "get /missing HTTP/1.1" 404 196 "" ""',
]


@pytest.fixture
def write_log(tmp_path):
    """Return a helper that writes lines to a log file under tmp_path."""
    def _write(name: str, lines: list[str]) -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def laravel_log(write_log):
    return write_log("laravel.log", SAMPLE_LARAVEL_LINES)


@pytest.fixture
def apache_log(write_log):
    return write_log("error.log", SAMPLE_APACHE_LINES)


@pytest.fixture
def access_log(write_log):
    return write_log("access.log", SAMPLE_ACCESS_LINES)
