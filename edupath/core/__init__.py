"""
Cross-cutting primitives shared across the EduPath backend: settings, logging
setup and credential hashing.
"""
