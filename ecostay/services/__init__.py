"""
Service layer.

Provides the client's business logic:
- Activity aggregation and coin balances
- Activity submission with its coin ledger credit
- Comments, media attachments and rating upserts
- Hostel listing, registration, profile/dashboard loads and favorites
- Wishes and the forum
- The authenticated session context
- The chat proxy client and language-model generator
"""

from ecostay.services.service_factory import ServiceFactory

__all__ = ["ServiceFactory"]
