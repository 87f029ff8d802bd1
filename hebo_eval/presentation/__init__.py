"""
Presentation layer
"""
