"""Build script for the optional Cython extension.

Usage:
    python setup_cython.py build_ext --inplace

This compiles prefixtrie/trie.py (pure-Python mode) into a shared-object
(.so / .pyd) file that Python imports in place of the .py module.
"""

from setuptools import setup, Extension
from Cython.Build import cythonize

extensions = [
    Extension(
        "prefixtrie.trie",
        ["prefixtrie/trie.py"],
    ),
]

setup(
    name="prefixtrie-cython",
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
            # Annotations stay hints; Trie accepts any iterable key.
            "annotation_typing": False,
        },
    ),
)
