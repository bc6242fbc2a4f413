"""
Smoothie command-line interface.
"""
