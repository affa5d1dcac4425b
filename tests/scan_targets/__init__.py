"""Importable modules scanned by the bulk registration tests."""
