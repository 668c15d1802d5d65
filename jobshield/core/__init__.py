"""
Core utilities: exceptions and cross-cutting concerns shared by the
analysis engine and the evaluator.
"""
