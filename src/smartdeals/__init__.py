"""Smart Deals: marketplace backend.

Users, product listings, and bids on products, served over a small REST
API backed by MongoDB. Bid listing is protected by ID-token auth.
"""

__version__ = "0.1.0"
