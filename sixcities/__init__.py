"""
Six Cities offer service.
"""
