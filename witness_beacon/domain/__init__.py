"""Domain layer for witness selection.

Pure, deterministic logic with no infrastructure dependencies:
hashing, claim identifiers, seed derivation and witness sampling.
"""
