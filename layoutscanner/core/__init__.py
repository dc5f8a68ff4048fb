"""
Core scanning components: issues, rules, the directory walker and the
scan engine.
"""
