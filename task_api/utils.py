from .errors import MISSING_FIELDS_MESSAGE

REQUIRED_FIELDS = ("task", "status")


def validate_task_data(task_data: dict) -> tuple[bool, str]:
    """Validate task data and return (is_valid, error_message)"""
    for name in REQUIRED_FIELDS:
        if not task_data.get(name):
            return False, MISSING_FIELDS_MESSAGE

    return True, ""
