"""Error taxonomy for the event planning agent."""


class AgentError(Exception):
    """Base class for every error raised by the agent."""


class ConfigurationError(AgentError):
    """Required configuration (credential, endpoint URL) is missing."""


class BackendUnavailable(ConfigurationError):
    """The completion backend has no endpoint URL or credential configured."""


class UpstreamError(AgentError):
    """An upstream HTTP call failed or returned a non-2xx status."""


class BackendError(UpstreamError):
    """The completion backend call failed."""


class InvalidRequestError(AgentError):
    """The incoming chat request does not match the input contract."""
