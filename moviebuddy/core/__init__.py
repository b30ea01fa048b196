"""Coeur du domaine : entites, ports et exceptions."""
