"""Exception types shared by the repositories, the API and the CLI."""


class GymBuddyError(Exception):
    """Base class for gymbuddy errors."""


class ValidationError(GymBuddyError):
    """A required field is missing, blank or references nothing."""


class NotFoundError(GymBuddyError):
    """The targeted record does not exist."""


class StoreClosedError(GymBuddyError):
    """The store handle was used after being closed."""
