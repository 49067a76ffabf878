"""Utility helpers for HashCrawler"""

from .input_utils import collect_hashes, read_hash_file, read_lines

__all__ = ['collect_hashes', 'read_hash_file', 'read_lines']
