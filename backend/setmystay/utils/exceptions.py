class SetMyStayError(Exception):
    """Base error for the SetMyStay service layer."""


class ItemNotFoundError(SetMyStayError):
    pass


class BedUnavailableError(SetMyStayError):
    pass


class AdminAuthError(SetMyStayError):
    """Raised when an admin factor does not match or a session is unknown."""


class SmartSortError(SetMyStayError):
    pass
