"""MP3 format handler."""
