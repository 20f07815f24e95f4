"""Command line client for the laundry power monitor service."""
