"""
Character set, generation and validation helpers for passgen.
"""
