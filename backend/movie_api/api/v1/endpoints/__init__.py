"""
API v1 Endpoints
"""
