"""
Customer DB - in-memory customer store driven by a quasi-SQL command batch

Reads a seed file into an ordered record store, replays INSERT / DELETE /
UPDATE / TRUNCATE commands against it, and appends a full-table snapshot to
an output log after every command.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
