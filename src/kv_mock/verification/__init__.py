from .errors import KvAssertionError
from .exhaustiveness import DEFAULT_DISPLAY_LIMIT, format_unverified, no_more_interactions
from .quantifiers import DEFAULT_QUANTIFIER, Quantifier, QuantifierKind
from .verifier import AssertKv, VerificationChain

__all__ = [
    "DEFAULT_DISPLAY_LIMIT",
    "DEFAULT_QUANTIFIER",
    "AssertKv",
    "KvAssertionError",
    "Quantifier",
    "QuantifierKind",
    "VerificationChain",
    "format_unverified",
    "no_more_interactions",
]
