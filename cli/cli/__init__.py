"""Command line interface for the driver registry."""
