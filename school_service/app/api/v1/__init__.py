"""
Version 1 of the School Service API.
"""
