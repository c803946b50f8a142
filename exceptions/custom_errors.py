class PlannerError(Exception):
    """Base class for every error raised by the vaccination planner."""

    pass


class DuplicateKeyError(PlannerError):
    """Raised when a person or hub is registered twice under the same key."""

    pass


class NotFoundError(PlannerError):
    """Raised when a key does not match any registered entity."""

    pass


class HubNotFoundError(NotFoundError):
    """Raised when a hub name is not defined."""

    pass


class PersonNotFoundError(NotFoundError):
    """Raised when an SSN does not match any registered person."""

    pass


class NotConfiguredError(PlannerError):
    """Raised when age intervals, weekly hours or staffing are required but missing."""

    pass


class HubNotStaffedError(NotConfiguredError):
    """Raised when the capacity of a hub is requested before its staff is set."""

    pass


class InvalidConfigurationError(PlannerError):
    """Raised for malformed breakpoints, staffing or working hours."""

    pass


class MalformedHeaderError(InvalidConfigurationError):
    """Raised when a people CSV does not start with the expected header."""

    pass


class InvalidArgumentError(PlannerError):
    """Raised when an argument is outside its allowed range (e.g. a day index)."""

    pass


class NoDataError(PlannerError):
    """Raised when a statistic is computed over an empty population."""

    pass


class NoPeopleError(NoDataError):
    """Raised when the registry holds no people at all."""

    pass
