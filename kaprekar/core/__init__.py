"""Core Layer — pure Kaprekar routine logic, no IO, no logging.

Invariants:
    - No module in core/ imports from config, infrastructure/, or main
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell (main.py writes, core computes)
"""
