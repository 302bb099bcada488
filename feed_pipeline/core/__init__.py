"""
YouTube Channel Feed - core services
"""
