"""Scoring domain services: ledger, aggregation and access.

Routes import from here, keeping HTTP concerns out of the ledger and
aggregation logic.
"""
