# basicfmt/ui/__init__.py
# Console presentation helpers

from .reporting import report_result

__all__ = ["report_result"]
