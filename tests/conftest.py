from collections.abc import Callable
from typing import Any

import pytest

from config import Config
from custom_logging import Logger

DEFAULT_TEMPLATE = "$ORIGIN {{ ZONE }}.\n; serial {{ SERIAL }}\n{{ PTR_RECORDS }}"


@pytest.fixture(autouse=True)
def reset_ptr_generator_logger():
    logger = Logger.getPTRGeneratorLogger()
    handlers = list(logger.handlers)
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def template_dir(tmp_path):
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "zone-template.tpl").write_text(DEFAULT_TEMPLATE, encoding="utf-8")
    return directory


@pytest.fixture
def make_config(tmp_path, template_dir) -> Callable[..., Config]:
    """Build a validated config writing into ``tmp_path``."""

    def _make(**global_overrides: Any) -> Config:
        data: dict[str, Any] = {
            "global": {
                "ptr_domain": "example.net",
                "out_directory": str(tmp_path / "zones"),
                "template_directory": str(template_dir),
                "logging": [],
            },
            "netbox": {"api_uri": "https://netbox.invalid/api", "api_key": "secret"},
        }
        data["global"].update(global_overrides)
        return Config.model_validate(data)

    return _make
