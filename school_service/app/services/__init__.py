"""
Service layer for the School Service.
"""
