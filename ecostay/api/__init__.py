"""
HTTP surface: the chat proxy endpoint.
"""
