"""Utilitaires de découpage des champs d'adresse."""
