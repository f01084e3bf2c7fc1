"""
tmcore - Translation-memory matching core.

Pure text algorithms for finding reusable prior translations: edit distance,
fuzzy corpus ranking, locale-aware stemming and sentence/word segmentation.
Storage, catalogs and machine translation live with the host application.
"""

__version__ = "0.1.0"
