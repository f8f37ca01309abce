from config import DEMO_USER_ID


def current_user_id() -> str:
    """
    Identity of the caller. No auth collaborator is wired in yet, so every
    request acts as the configured demo learner.
    """
    return DEMO_USER_ID
