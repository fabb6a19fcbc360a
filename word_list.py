"""Reading plain-text word lists (one word per line) into a DLB trie."""

import gzip
import logging
from typing import BinaryIO, Iterator, Optional

from dlb_trie import DLBTrie

log = logging.getLogger("dlb_autocomplete")


def _wrap_read_stream(stream: BinaryIO, compression: Optional[str]) -> BinaryIO:
    """Wrap a file stream with decompression if needed."""
    if compression == "gzip":
        return gzip.open(stream, "rb")  # type: ignore[return-value]
    elif compression is None:
        return stream
    else:
        raise ValueError(f"Unsupported compression: {compression}")


def load_words(url: str, storage_options: Optional[dict] = None) -> Iterator[str]:
    """Yield the words of a word-list file, one per non-blank line.

    Surrounding whitespace is stripped from every line; blank lines are
    skipped.

    Args:
        url: Path or URL of the word list.
        storage_options: fsspec options. Set ``compression='gzip'`` for a
            gzipped file and ``encoding`` to override UTF-8.

    Raises:
        ValueError: If the compression is not supported.
    """
    from fsspec.core import url_to_fs

    opts = dict(storage_options or {})
    compression = opts.pop("compression", None)
    encoding = opts.pop("encoding", "utf-8")
    fs, path = url_to_fs(url, **opts)

    with fs.open(path, "rb") as raw_stream:
        with _wrap_read_stream(raw_stream, compression) as f:
            for line in f:
                word = line.decode(encoding).strip()
                if word:
                    yield word


def load_trie(url: str, storage_options: Optional[dict] = None,
              trie: Optional[DLBTrie] = None) -> DLBTrie:
    """Add every word of a word-list file to *trie* (a new one by default).

    Args:
        url: Path or URL of the word list.
        storage_options: Passed to :func:`load_words`.
        trie: Existing trie to extend.

    Returns:
        The trie the words were added to.
    """
    if trie is None:
        trie = DLBTrie()
    added = trie.update(load_words(url, storage_options))
    log.info("Loaded %s words from %s", f"{added:,}", url)
    return trie
