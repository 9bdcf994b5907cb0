"""
Persistence adapters.

Services depend on ``CollectionStore`` rather than touching the JSON files.
"""
