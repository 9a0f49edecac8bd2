"""
Sales app for the kiosk point of sale.
"""
