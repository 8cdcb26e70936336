"""
Activity submission flow.
"""

from ecostay.services.activity.activity_submission_service import (
    ActivitySubmission,
    ActivitySubmissionService,
)

__all__ = ["ActivitySubmission", "ActivitySubmissionService"]
