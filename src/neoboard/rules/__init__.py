"""Rules engines behind a single adapter contract.

Quick start::

    from neoboard.rules import MoveRequest, RulesEngine, create_rules

    rules = create_rules(RulesEngine.FULL)
    result = rules.move(MoveRequest("e2", "e4"))
"""

from neoboard.rules.adapter import Candidate, MoveRequest, RulesAdapter
from neoboard.rules.factory import RulesEngine, create_rules
from neoboard.rules.full import FullRules
from neoboard.rules.light import LightRules

__all__ = [
    "Candidate",
    "FullRules",
    "LightRules",
    "MoveRequest",
    "RulesAdapter",
    "RulesEngine",
    "create_rules",
]
