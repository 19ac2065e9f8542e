"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: extension checks, text decoding, PDF extraction
    - agent/: configuration, prompt, answer parsing, wrapped failures
    - chat/: document panel and transcript state
    - ui/: theme preference
"""
