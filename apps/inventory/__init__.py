"""
Inventory app for kiosk product and stock management.
"""
