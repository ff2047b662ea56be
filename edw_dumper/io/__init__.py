"""Top-level exports for dumper output sinks."""

from .sink import DirectorySink, MemorySink, OutputSink

__all__ = [
    "DirectorySink",
    "MemorySink",
    "OutputSink",
]
