"""Command line interface for the CPU temperature monitor."""
