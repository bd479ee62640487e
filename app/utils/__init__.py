"""
Shared helpers: auth dependencies, logging, response mapping
"""
