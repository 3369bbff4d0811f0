"""Tests for mathedit.utils."""

import logging

from mathedit.utils import get_logger, provision_new_id


class TestGetLogger:
    def test_prefixes_bare_names(self) -> None:
        assert get_logger("keys").name == "mathedit.keys"

    def test_keeps_package_names(self) -> None:
        assert get_logger("mathedit.cursor").name == "mathedit.cursor"
        assert get_logger("mathedit").name == "mathedit"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)


class TestProvisionNewId:
    def test_format(self) -> None:
        node_id = provision_new_id()
        assert len(node_id) == 16
        assert node_id == node_id.lower()
        int(node_id, 16)

    def test_unique(self) -> None:
        assert len({provision_new_id() for _ in range(1000)}) == 1000
