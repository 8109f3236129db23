"""
FastAPI routers and middleware.
"""
