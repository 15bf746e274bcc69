"""
Mechanic Shop records client.
"""
