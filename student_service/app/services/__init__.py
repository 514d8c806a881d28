"""
Service layer for the Student Service.

Services encapsulate business logic and receive their stores as
constructor arguments so that API handlers stay independent of the
persistence technology.
"""
