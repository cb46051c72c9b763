"""Publisher ingestion.

This package fetches ranking pages, parses them into advisor records,
and chooses between fresh and previous records per publisher.
"""
