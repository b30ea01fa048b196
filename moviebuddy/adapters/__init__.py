"""Adaptateurs : implementations concretes des ports (metadonnees, i18n, CLI)."""
