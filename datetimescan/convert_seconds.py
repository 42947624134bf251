"""Render a number of seconds in seconds, minutes, hours or h/m/s form."""

VALID_UNITS = ("hms", "h", "m", "s")


def format_hms(seconds: int) -> str:
    """Format a non-negative number of seconds as e.g. '1h01m01s'.

    Zero components are left out, except that zero seconds yields '0s'.
    """
    if seconds < 0:
        raise ValueError(f"seconds=({seconds}) must not be negative")
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    result = ""
    if hours > 0:
        result += f"{hours}h"
    if minutes > 0:
        result += f"{minutes:02d}m" if result else f"{minutes}m"
    if secs > 0 or not result:
        result += f"{secs:02d}s" if result else f"{secs}s"
    return result


def convert_seconds(seconds: int, unit: str) -> str:
    """Convert an integer number of seconds to a string in the given unit.

    ``unit`` is one of 'hms', 'h', 'm' or 's' (case-insensitive). Hours and
    minutes are given with two decimal places.
    """
    match unit.lower():
        case "hms":
            if seconds < 0:
                return "-" + format_hms(-seconds)
            return format_hms(seconds)
        case "h":
            return f"{seconds / 3600.0:.2f}"
        case "m":
            return f"{seconds / 60.0:.2f}"
        case "s":
            return str(seconds)
        case _:
            raise ValueError(f"unit=({unit}) must equal 'hms' / 'h' / 'm' / 's'")