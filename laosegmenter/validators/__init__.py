"""Grammar validators."""

from .base import GrammarValidator
from .basic import BasicGrammarValidator
from .extended import ExtendedGrammarValidator

# Registry of available rule sets
VALIDATOR_REGISTRY = {
    "basic": BasicGrammarValidator,
    "extended": ExtendedGrammarValidator,
}


def get_validator(rule_set: str = "extended") -> GrammarValidator:
    """Instantiate the validator registered under ``rule_set``.

    Raises:
        ValueError: If no validator is registered under that name
    """
    if rule_set not in VALIDATOR_REGISTRY:
        raise ValueError(
            f"Unknown rule set: {rule_set} "
            f"(available: {', '.join(sorted(VALIDATOR_REGISTRY))})"
        )
    return VALIDATOR_REGISTRY[rule_set]()


__all__ = [
    "GrammarValidator",
    "BasicGrammarValidator",
    "ExtendedGrammarValidator",
    "VALIDATOR_REGISTRY",
    "get_validator",
]
