"""
HTTP API for the franchise stock service.
"""
