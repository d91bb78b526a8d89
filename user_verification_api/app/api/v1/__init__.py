"""
Version 1 of the User Verification API.
"""
