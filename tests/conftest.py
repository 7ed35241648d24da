"""
Shared fixtures for BoardScout tests.
"""

from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest
from boardscout.config import Config, ExtractionSettings, TransportConfig
from boardscout.extractor import BoardIdExtractor
from tests.helpers.pages import BOARD_URL, make_html


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Tests across modules")


@pytest.fixture
def html_factory() -> Callable[..., str]:
    return make_html


@pytest.fixture
def board_url() -> str:
    return BOARD_URL


@pytest.fixture
def extraction_settings() -> ExtractionSettings:
    return ExtractionSettings()


@pytest.fixture
def extractor(extraction_settings: ExtractionSettings) -> BoardIdExtractor:
    return BoardIdExtractor(extraction_settings)


@pytest.fixture
def config() -> Config:
    return Config(transport=TransportConfig(backends=["allorigins", "codetabs"], timeout=0.5))


@pytest.fixture
def live_page_factory():
    """Playwright-like page double."""

    def _factory(html: str, url: str = BOARD_URL, framework_props=None, evaluate_error: Exception | None = None):
        page = MagicMock()
        page.url = url
        page.content = AsyncMock(return_value=html)
        if evaluate_error is not None:
            page.evaluate = AsyncMock(side_effect=evaluate_error)
        else:
            page.evaluate = AsyncMock(return_value=framework_props or [])
        return page

    return _factory
