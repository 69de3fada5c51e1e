"""Lifemoji vocabulary, fetched once from the project repository, then cached.

Layout:
    ~/.life-commit/
    ├── commits.json        # the commit store
    └── lifemojis.json      # raw copy of the remote vocabulary

The cache is never refreshed automatically; delete the file to refetch.
"""
