"""Error message formatting for user-friendly exception handling."""

import yaml


def _format_yaml_error(error: yaml.YAMLError) -> str:
    """Format YAML parsing errors from a descriptions file."""
    mark = getattr(error, "problem_mark", None)
    if mark is not None:
        return (
            "Descriptions file is not valid YAML "
            f"(line {mark.line + 1}, column {mark.column + 1}): "
            f"{getattr(error, 'problem', error)}"
        )
    return f"Descriptions file is not valid YAML: {error}"


ERROR_TYPES = {
    FileNotFoundError: lambda e: str(e),
    ValueError: lambda e: str(e),
    yaml.YAMLError: _format_yaml_error,
    PermissionError: lambda e: f"Permission denied: {e!s}\nCheck file permissions.",
    OSError: lambda e: f"System error: {e!s}",
}


def get_error_human_message(error: Exception) -> str:
    """
    Get user-friendly error message based on exception type.

    Args:
        error: The exception to format

    Returns:
        Formatted error message suitable for end users
    """
    for error_type, handler in ERROR_TYPES.items():
        if isinstance(error, error_type):
            return handler(error)
    return str(error)
