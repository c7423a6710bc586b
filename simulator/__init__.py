"""Compound interest simulator backend."""
