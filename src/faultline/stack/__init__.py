"""Stack – caller frame capture and rendering."""
from faultline.stack.trace import INTERNAL_FILES, Frame, Trace, capture, internal_suffixes

__all__ = ["INTERNAL_FILES", "Frame", "Trace", "capture", "internal_suffixes"]
