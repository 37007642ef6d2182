"""Accepted header values.

The boolean vocabulary and duplicate-key policies that header parsing
understands.
"""

TRUE_TOKENS = ("on", "yes", "true", "1", "y")
FALSE_TOKENS = ("off", "no", "false", "0", "n")

DUPLICATE_POLICIES = ("last", "first", "error")
