"""
Test module.
"""
