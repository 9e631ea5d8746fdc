from .controller import FormController
from .errors import DocumentError, NotFoundError, TransportError, ValidationError
from .history import HistoryStore
from .logging_utils import setup_logging
from .models import (
    BuildResult,
    HistoryEntry,
    ReplayFields,
    ReportRequest,
    ReportType,
    SubmissionResult,
    SubmitOutcome,
)
from .request_builder import RequestBuilder
from .transport import HttpTransport, LocalDocumentTransport, SimulatedTransport, Transport

__all__ = [
    "setup_logging",
    "BuildResult",
    "HistoryEntry",
    "ReplayFields",
    "ReportRequest",
    "ReportType",
    "SubmissionResult",
    "SubmitOutcome",
    "RequestBuilder",
    "HistoryStore",
    "FormController",
    "Transport",
    "HttpTransport",
    "SimulatedTransport",
    "LocalDocumentTransport",
    "ValidationError",
    "TransportError",
    "NotFoundError",
    "DocumentError",
]
__version__ = "0.1.0"
