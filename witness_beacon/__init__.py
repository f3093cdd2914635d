"""
Witness Beacon - deterministic witness selection for claim attestation

Every party holding the same public inputs (claim metadata, epoch,
required witness count, timestamp and the ordered witness pool) derives
the same witness subset without talking to anyone else.

Pipeline:
- Claim metadata is hashed into a Keccak-256 claim identifier
- (identifier, epoch, required count, timestamp) is hashed into a seed
- The seed drives swap-pop sampling over the witness pool
- Selected witnesses are asked to sign concurrently
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
