"""
Version 1 of the Student Service API.
"""
