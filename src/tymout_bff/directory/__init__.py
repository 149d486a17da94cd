from tymout_bff.directory.base import EventDirectory
from tymout_bff.directory.http import DEFAULT_EVENT_SERVICE_URL, HTTPEventDirectory

__all__ = ["DEFAULT_EVENT_SERVICE_URL", "EventDirectory", "HTTPEventDirectory"]
