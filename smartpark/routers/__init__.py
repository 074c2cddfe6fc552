"""
API routers, one per path group.
"""
