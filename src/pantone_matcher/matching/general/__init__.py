"""
general.
=======

Does: Group project-wide helpers that are not color specific (data loading, logging).
"""

__docformat__ = "google"
