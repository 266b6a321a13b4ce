class TicketAnalyzerError(Exception):
    """Base class for errors that abort a run."""


class LoadError(TicketAnalyzerError):
    """Tickets file could not be read, parsed or validated."""
