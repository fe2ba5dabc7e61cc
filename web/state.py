"""Analyzer state for the web application."""

from dataclasses import dataclass, field
from typing import Optional

from yomitoki import AnalyzerHandle, KanaService, ParseService


@dataclass
class AppState:
    """
    Holds the analyzer handle and the services built on it.

    The handle is created on first use, so a bad YOMITOKI_BACKEND value is
    reported by the endpoints instead of breaking the import.
    """

    backend: Optional[str] = None
    handle: Optional[AnalyzerHandle] = None
    _parser: Optional[ParseService] = field(default=None, repr=False)
    _kana: Optional[KanaService] = field(default=None, repr=False)

    def get_handle(self) -> AnalyzerHandle:
        """
        Return the analyzer handle, creating it on first call.

        Raises:
            ValueError: If the configured backend name is unknown.
        """
        if self.handle is None:
            self.handle = AnalyzerHandle(backend=self.backend)
        return self.handle

    @property
    def parser(self) -> ParseService:
        if self._parser is None:
            self._parser = ParseService(self.get_handle())
        return self._parser

    @property
    def kana(self) -> KanaService:
        if self._kana is None:
            self._kana = KanaService(self.get_handle())
        return self._kana


# Global instance
app_state = AppState()
