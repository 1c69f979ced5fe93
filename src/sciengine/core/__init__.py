"""
Core domain models, mathematical primitives, and error types.

This module contains the foundational building blocks of the engine that
are independent of the expression pipeline and of any UI layer.
"""
