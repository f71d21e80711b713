"""Tests for rules-engine selection."""

import logging

import pytest

from neoboard.core.notation import STARTING_FEN
from neoboard.rules.factory import RulesEngine, create_rules
from neoboard.rules.full import FullRules
from neoboard.rules.light import LightRules


class TestCreateRules:
    def test_default_is_light(self) -> None:
        assert isinstance(create_rules(), LightRules)

    def test_full(self) -> None:
        assert isinstance(create_rules(RulesEngine.FULL), FullRules)

    def test_initial_fen(self) -> None:
        fen = "4k3/8/8/8/8/8/8/4K3 w - - 0 1"
        assert create_rules(RulesEngine.FULL, fen).get_position() == fen
        assert create_rules(RulesEngine.LIGHT, fen).get_position() == fen

    def test_light_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="neoboard.rules.factory"):
            create_rules(RulesEngine.LIGHT)
        assert "light rules" in caplog.text

    def test_full_is_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="neoboard.rules.factory"):
            rules = create_rules(RulesEngine.FULL)
        assert caplog.text == ""
        assert rules.get_position() == STARTING_FEN
