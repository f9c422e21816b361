"""
Core functionality for the YouTube segment summarizer application.

This package contains modules for fetching transcripts, chunking them into
time windows and summarizing them.
"""
