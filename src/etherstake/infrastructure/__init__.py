"""
Infrastructure layer: persistence, auth, cache, rate limiting, monitoring.
"""
