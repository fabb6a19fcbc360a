"""Build script for dlb-autocomplete.

The package is a set of flat top-level modules: the trie store
(dlb_trie), the running-prefix cursor (prefix_cursor), word-list loading
(word_list) and the interactive console (autocomplete_cli).  Install with
``pip install -e .[test]`` to get pytest and pytest-benchmark as well.
"""

from setuptools import setup

setup(
    name="dlb-autocomplete",
    version="0.1.0",
    description="Incremental-prefix autocomplete dictionary backed by a DLB trie",
    python_requires=">=3.9",
    py_modules=[
        "trie_errors",
        "dlb_trie",
        "prefix_cursor",
        "word_list",
        "autocomplete_cli",
    ],
    install_requires=[
        "bitarray",
        "fsspec",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-benchmark",
        ],
    },
    entry_points={
        "console_scripts": [
            "dlb-autocomplete=autocomplete_cli:main",
        ],
    },
)
