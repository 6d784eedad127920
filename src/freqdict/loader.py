from __future__ import annotations

import codecs
import logging
import os
from abc import ABC, abstractmethod
from typing import Iterable

from .config import LoaderConfig
from .errors import ResourceOpenError
from .models import LoadResult, Token
from .paths import resolve_dictionary_path
from .streaming import ParserState, StreamingParser

LOGGER = logging.getLogger(__name__)


class DictLoader(ABC):
    """Anything that can ingest dictionary tokens, one at a time or as a stream."""

    @abstractmethod
    def add_token(self, token: Token) -> None:
        """Ingest a single token."""
        raise NotImplementedError

    def load(self, tokens: Iterable[Token]) -> None:
        """Ingest a stream of tokens in order."""
        for token in tokens:
            self.add_token(token)


def load_dictionary(
    loader: DictLoader,
    name: str | os.PathLike[str],
    config: LoaderConfig | None = None,
) -> LoadResult:
    """
    Read the named dictionary file and pass all of its tokens to ``loader``.

    The file is parsed on a background thread while ``loader.load`` consumes
    the token stream on the calling thread. Tokens delivered before a failure
    stay delivered; the failure is then raised as a single DictionaryError.

    Raises
    ------
    PathResolutionError
        When a relative name cannot be made absolute.
    ResourceOpenError
        When the file cannot be opened.
    MalformedLineError, StreamReadError
        When parsing stops early.
    """
    config = config or LoaderConfig()
    path = resolve_dictionary_path(name)
    try:
        codecs.lookup(config.encoding)
        handle = path.open("rb")
    except (OSError, LookupError) as exc:
        raise ResourceOpenError(path, exc) from exc

    with handle:
        parser = StreamingParser(
            handle,
            grammar=config.build_grammar(),
            buffer_size=config.buffer_size,
            max_line_length=config.max_line_length,
            encoding=config.encoding,
            name=str(path),
        ).start()
        stream = parser.tokens()
        try:
            loader.load(stream)
        finally:
            if not stream.exhausted:
                # The consumer stopped early (returned or raised); unblock the producer.
                parser.cancel()
            error = parser.wait()

    if parser.state is ParserState.CANCELLED:
        LOGGER.warning(
            "Consumer stopped after %d tokens; remaining entries in %s were not read.",
            stream.delivered,
            path,
        )
    if error is not None:
        raise error
    LOGGER.info(
        "Loaded %d tokens from %s (%d lines skipped).",
        stream.delivered,
        path,
        parser.stats.skipped,
    )
    return LoadResult(path=path, stats=parser.stats)
