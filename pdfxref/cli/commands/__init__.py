"""Subcommands registered by :mod:`pdfxref.cli.main`."""
