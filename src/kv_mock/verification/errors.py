from __future__ import annotations


class KvAssertionError(AssertionError):
    # Verification failure: quantifier mismatch or unverified interactions.
    pass
