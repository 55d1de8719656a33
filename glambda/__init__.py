"""
The glambda console: a read-execute-print loop for a small typed lambda calculus.
"""
