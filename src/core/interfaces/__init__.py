"""Interfaces/abstracciones del Core.

Contratos (Protocol) que implementan las superficies concretas de la UI.
"""
