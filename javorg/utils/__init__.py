"""Utilitaires et constantes partages."""
