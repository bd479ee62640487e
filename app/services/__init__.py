"""
Downstream dispatch and envelope translation
"""
