"""
Infrastructure Layer

Concrete clients and dependency wiring.
"""
