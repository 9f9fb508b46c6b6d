import logging
from greenfarm.core.exceptions import ContactValidationError
from greenfarm.models.contact import ContactSubmission

logger = logging.getLogger(__name__)


def validate_submission(submission: ContactSubmission) -> None:
    """
    Reject a contact submission unless all five fields are non-empty.

    Only presence is checked. The email field is not format-validated, so
    any non-empty string passes.

    Raises:
        ContactValidationError: if one or more fields are empty or whitespace
    """
    missing = submission.missing_fields()
    if missing:
        logger.info(f"⏭️ Contact submission rejected, missing fields: {', '.join(missing)}")
        raise ContactValidationError(missing)
