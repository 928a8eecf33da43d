"""
Core package - Shared service base class, utilities and dependency wiring.
"""
