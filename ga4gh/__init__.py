"""
GA4GH API tooling.
"""
