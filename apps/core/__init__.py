"""
Core app for the kiosk backend.

Holds the error taxonomy shared by the inventory, sales and reporting apps
and the exception handler that turns those errors into API responses.
"""
