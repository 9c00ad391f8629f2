"""
Core functionality for the Video Digest backend.

This package contains modules for downloading YouTube content, looking up
video metadata, transcribing audio, resolving transcripts and summarizing them.
"""
