"""Fatal errors raised at the boundaries of a run."""


class TopLangsError(Exception):
    """Base class for every error that aborts a run."""


class ConfigurationError(TopLangsError):
    pass


class TransportError(TopLangsError):
    """The GraphQL endpoint could not be reached or answered non-2xx."""

    def __init__(self, status_code, reason=None):
        self.status_code = status_code
        self.reason = reason
        if status_code is None:
            message = f"GitHub API request failed: {reason}"
        else:
            message = f"GitHub API error: {status_code}"
            if reason:
                message += f" ({reason})"
        super().__init__(message)


class UpstreamQueryError(TopLangsError):
    """The response was 2xx but carried a GraphQL ``errors`` payload."""

    def __init__(self, errors):
        self.errors = errors
        super().__init__(f"GraphQL errors: {errors}")


class ResponseDecodeError(TopLangsError):
    pass


class EmptyChartError(TopLangsError):
    pass
