"""Command line interface for Digiroll."""
