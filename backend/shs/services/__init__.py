"""Directory-index services — scanning, sorting and view-model assembly.

All functions are stateless; configuration is passed in per call.
"""
