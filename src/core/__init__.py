"""
Core decimal model, mathematical primitives, and contracts.

This module contains the foundational building blocks of the Math Library
that are independent of any concrete backend.
"""
