"""
Eco-Stay Connect client core.

Data access, aggregation and view state for the hostel sustainability
network, plus the chat proxy service.
"""

__version__ = "0.1.0"
