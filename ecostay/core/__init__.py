"""
Core building blocks: exceptions, logging helpers and domain constants.
"""
