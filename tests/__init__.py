"""
Test suite for the delta_render project.
"""
