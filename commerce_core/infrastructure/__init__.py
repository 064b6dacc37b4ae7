"""
Infrastructure Layer - Storage

This layer contains the record store contract and its in-memory
implementation. Services depend on the contract, so the store is
replaceable in tests.
"""
