"""
Core errors, domain types, numeric primitives, and input contracts.

Everything here is pure and independent of console I/O.
"""
