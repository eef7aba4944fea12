"""
BhashaBazaar voice ordering backend
Multilingual transcript interpretation for street-food vendors
"""

__version__ = "1.0.0"
