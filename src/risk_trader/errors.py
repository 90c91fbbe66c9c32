"""Error taxonomy for trading cycles."""


class TraderError(RuntimeError):
    pass


class ConfigurationError(TraderError):
    """Unknown market or missing/invalid configuration; fatal at startup."""


class ConnectivityError(TraderError):
    """A collaborator fetch failed; ends the current cycle only."""


class OrderRejected(TraderError):
    """The exchange refused a limit order submission."""
