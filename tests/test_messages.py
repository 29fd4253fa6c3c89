# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for MessageCatalog rendering and SchemaConfig."""

import re

import pytest
from pydantic import ValidationError as PydanticValidationError

from schemakit import DEFAULT_MESSAGES, MessageCatalog, SchemaConfig


class TestMessageCatalog:
    def test_plain_template(self):
        assert MessageCatalog().render("str?") == "must be a string"

    def test_argument_substitution(self):
        assert MessageCatalog().render("gt?", {"num": 18}) == "must be greater than 18"

    def test_list_argument(self):
        catalog = MessageCatalog()
        assert catalog.render("included_in?", {"list": [1, 2, 3]}) == "must be one of: 1, 2, 3"

    def test_pattern_argument(self):
        catalog = MessageCatalog({"format?": "must match {format}"})
        assert catalog.render("format?", {"format": re.compile(r"\d+")}) == r"must match \d+"

    def test_input_placeholder(self):
        catalog = MessageCatalog({"str?": "{input} is not a string"})
        assert catalog.render("str?", input=5) == "5 is not a string"

    def test_missing_argument_leaves_template(self):
        assert MessageCatalog().render("gt?") == "must be greater than {num}"

    def test_fallback(self):
        assert MessageCatalog().render("custom?") == "is invalid"

    def test_missing(self):
        assert MessageCatalog().missing() == "is missing"

    def test_overrides_do_not_leak(self):
        MessageCatalog({"str?": "changed"})
        assert DEFAULT_MESSAGES["str?"] == "must be a string"
        assert MessageCatalog().render("str?") == "must be a string"

    def test_contains(self):
        assert "str?" in MessageCatalog()
        assert "custom?" not in MessageCatalog()


class TestSchemaConfig:
    def test_defaults(self):
        config = SchemaConfig()
        assert config.messages == {}
        assert config.or_separator == " or "
        assert config.check_predicates is True

    def test_frozen(self):
        config = SchemaConfig()
        with pytest.raises(PydanticValidationError):
            config.or_separator = ", "

    def test_extra_forbidden(self):
        with pytest.raises(PydanticValidationError):
            SchemaConfig(locale="fr")
