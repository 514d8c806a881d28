"""
Student Service application package.

The service is organised as endpoints (``api/v1/endpoints``) calling
a service class (``services``) that works against a store
(``repositories``).  ``main.create_app`` wires these together.
"""
