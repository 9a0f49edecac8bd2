"""
Reporting app: read-only stock and sales reports.
"""
