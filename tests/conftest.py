from pathlib import Path

import pytest

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def checkout_file() -> Path:
    return FIXTURES / "java" / "CheckoutService.java"


@pytest.fixture
def greeting_app() -> Path:
    return FIXTURES / "greeting_app"


@pytest.fixture
def write_java(tmp_path):
    """파일명(확장자 포함)과 소스를 받아 tmp_path에 쓰고 경로를 반환한다."""

    def _write(file_name: str, source: str) -> Path:
        path = tmp_path / file_name
        path.write_text(source, encoding="utf-8")
        return path

    return _write
