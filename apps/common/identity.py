"""
Caller identity resolution.

Every operation receives the acting user explicitly. A verified bearer token
wins; without one the caller names itself by email and the user is loaded
from the database, so balances and flags always come from stored state.
"""
from .exceptions import InvalidInput, NotFound, Unauthorized


def _token_user(request):
    user = getattr(request, 'user', None)
    if user is not None and user.is_authenticated:
        return user
    return None


def resolve_caller(request, email=None, required=True):
    """
    Return the acting user for a request.

    Args:
        request: DRF request (JWT-authenticated or anonymous)
        email: Email supplied in the body or query string
        required: When False, an anonymous caller without email yields None

    Raises:
        InvalidInput: No token and no email while identity is required
        NotFound: Email does not belong to any user
        Unauthorized: Token user and supplied email disagree
    """
    from apps.users.services import UserService

    token_user = _token_user(request)
    if token_user is not None:
        if email and token_user.email.lower() != str(email).strip().lower():
            raise Unauthorized('Authenticated user does not match email')
        return token_user

    if not email:
        if required:
            raise InvalidInput('Email is required')
        return None

    return UserService.find_by_email(email)


def require_admin(request, email=None):
    """Return the acting user if it carries the admin flag, else raise Unauthorized"""
    try:
        user = resolve_caller(request, email)
    except (InvalidInput, NotFound):
        raise Unauthorized()

    if not user.is_admin:
        raise Unauthorized()
    return user


def require_admin_if_identified(request, email=None):
    """
    Apply require_admin to callers that send a token or an email.
    Anonymous callers pass through and get None.
    """
    if _token_user(request) is None and not email:
        return None
    return require_admin(request, email)
