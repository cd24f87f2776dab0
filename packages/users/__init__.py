"""
Users package - user records keyed by a normalized email and their entitlements.
"""
