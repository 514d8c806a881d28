"""
School Service application package.

Endpoints (``api/v1/endpoints``) call ``services.SchoolService``,
which works against a school store (``repositories``) and the remote
student client (``clients``).  ``main.create_app`` wires these
together.
"""
