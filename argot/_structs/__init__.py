"""
The structures argot is built from
"""
