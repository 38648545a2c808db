"""Servicios del Core: pipeline de descarga y controlador de la vista."""
