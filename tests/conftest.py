"""Shared fixtures for textmask tests."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from textmask import MaskRegistry, TextMask
from textmask.observability import set_config

PROFILES_YAML = """\
masks:
  us-phone:
    type: custom
    description: US phone number
    options:
      mask: "(999) 999-9999"
  price:
    type: money
    options:
      unit: "$"
      separator: "."
      delimiter: ","
  legacy-pager:
    type: pager
"""


@pytest.fixture
def registry() -> MaskRegistry:
    """A fresh registry of the built-in masks."""
    return MaskRegistry()


@pytest.fixture
def phone_options() -> dict[str, str]:
    """Options for a US phone number pattern."""
    return {"mask": "(999) 999-9999"}


@pytest.fixture
def phone_mask(phone_options: dict[str, str]) -> TextMask:
    """TextMask bound to the US phone pattern."""
    return TextMask("custom", phone_options)


@pytest.fixture
def profiles_file(tmp_path: Path) -> Path:
    """Path to a mask profiles YAML file."""
    path = tmp_path / "masks.yaml"
    path.write_text(PROFILES_YAML, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolate_logging_state() -> Generator[None, None, None]:
    """Restore root logger handlers and the global logging config after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    root.handlers[:] = handlers
    root.setLevel(level)
    set_config(None)
