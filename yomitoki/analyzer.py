"""
Lifecycle of the morphological analyzer engine.

An ``AnalyzerHandle`` owns at most one engine. The engine is built the
first time ``get()`` is called and then kept for the life of the handle;
there is no teardown, the engine's resources go away with the process.

Handles are created by whoever composes the application (the module-level
functions in ``yomitoki.binding``, or the web app state) and passed to the
services that need them.

Example:
    >>> from yomitoki.analyzer import AnalyzerHandle
    >>> handle = AnalyzerHandle(backend="mecab")
    >>> engine = handle.get()   # constructed here
    >>> engine is handle.get()  # and reused afterwards
    True
"""

import logging
import os
import threading
from typing import List, Optional

from .exceptions import EngineInitializationError
from .japanese.tokenizers import BACKENDS, create_engine
from .japanese.tokens import Token, snapshot

logger = logging.getLogger(__name__)

BACKEND_ENV_VAR = "YOMITOKI_BACKEND"


class AnalyzerHandle:
    """
    Lazily constructed, shared analyzer engine.

    Initialization is guarded by a lock so concurrent first calls build a
    single engine. A failed initialization is remembered and raised again
    on every later call; it is never retried.

    MeCab taggers and Sudachi tokenizers are not safe for concurrent
    queries on one instance, so ``tokens()`` serializes parses on
    ``lock``.

    Attributes:
        backend: Requested backend ('auto', 'mecab' or 'sudachi').
        lock: Mutex held while the engine parses and its nodes are copied.
    """

    def __init__(self, backend: Optional[str] = None, engine_factory=None):
        """
        Initialize the handle without building the engine.

        Args:
            backend: Engine to use. None reads the YOMITOKI_BACKEND
                     environment variable and defaults to 'auto'.
            engine_factory: Callable taking the backend name and returning
                            an engine. Defaults to ``create_engine``.

        Raises:
            ValueError: If the backend name is unknown.
        """
        if backend is None:
            backend = os.environ.get(BACKEND_ENV_VAR, "auto").strip().lower() or "auto"
        if backend not in BACKENDS:
            raise ValueError(
                f"Unknown backend {backend!r}; expected one of {', '.join(BACKENDS)}"
            )

        self.backend = backend
        self.lock = threading.Lock()
        self._engine_factory = engine_factory or create_engine
        self._init_lock = threading.Lock()
        self._engine = None
        self._error: Optional[EngineInitializationError] = None

    @property
    def initialized(self) -> bool:
        """True once an engine has been built successfully."""
        return self._engine is not None

    @property
    def backend_name(self) -> Optional[str]:
        """Name of the constructed engine, or None before initialization."""
        if self._engine is None:
            return None
        return getattr(self._engine, "name", self.backend)

    def get(self):
        """
        Return the engine, building it on first use.

        Returns:
            The engine instance. The same object is returned on every call.

        Raises:
            EngineInitializationError: If construction failed, now or on an
                                       earlier call.
        """
        if self._engine is not None:
            return self._engine

        with self._init_lock:
            if self._engine is not None:
                return self._engine
            if self._error is not None:
                raise self._error

            try:
                engine = self._engine_factory(self.backend)
            except EngineInitializationError as e:
                self._error = e
                logger.error("Analyzer engine initialization failed: %s", e)
                raise
            except Exception as e:
                self._error = EngineInitializationError(
                    f"Failed to initialize {self.backend} engine: {e}"
                )
                logger.exception("Analyzer engine initialization failed")
                raise self._error from e

            self._engine = engine
            logger.info(
                "Initialized %s analyzer engine",
                getattr(engine, "name", self.backend),
            )
            return engine

    def tokens(self, text: str) -> List[Token]:
        """Analyze ``text`` and return its tokens as an owned list."""
        return snapshot(self.get(), text, self.lock)
