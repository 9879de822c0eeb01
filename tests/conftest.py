import logging

import pytest

from seomatic import config


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch):
    for key in (
        "SEOMATIC_LOG_LEVEL",
        "SEOMATIC_LOG_DIR",
        "SEOMATIC_PRETTY",
        "SEOMATIC_JSON_LD_ENSURE_ASCII",
        "SEOMATIC_HEAD_COMPONENT",
    ):
        monkeypatch.delenv(key, raising=False)
    config.clear_runtime_overrides()
    config.refresh_settings()
    yield
    config.clear_runtime_overrides()
    config.refresh_settings()
    logger = logging.getLogger("seomatic")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
