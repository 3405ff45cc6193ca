"""
Domain services. Nothing in here knows about HTTP.
"""
