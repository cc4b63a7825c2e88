from .log_sinks import JsonlLogSink, NullLogSink, StdoutLogSink, build_log_sink
from .report_store import FileReportStore, InMemoryReportStore, file_report_store

# Public adapter exports are optional but make wiring simpler.
__all__ = [
    "FileReportStore",
    "InMemoryReportStore",
    "JsonlLogSink",
    "NullLogSink",
    "StdoutLogSink",
    "build_log_sink",
    "file_report_store",
]
