"""
Social Gateway

Forwards User, Post, Comment, Like and Feedback requests to the
downstream read/write service and unwraps its response envelope.
"""

__version__ = "1.0.0"
